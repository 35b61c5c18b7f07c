"""File templates for a generated ADK agent project.

All renderers are pure functions of their arguments.
"""

from __future__ import annotations

import json

from adkgen.models.options import DEFAULT_MODEL, AgentCreationOptions

DEVTOOLS_PACKAGE = "@google/adk-devtools"

_AGENT_TEMPLATE = """\
import {FunctionTool, LlmAgent} from '@google/adk';
import {z} from 'zod';
import dotenv from 'dotenv';

dotenv.config();

/* Mock tool implementation */
const getCurrentTime = new FunctionTool({
  name: 'get_current_time',
  description: 'Returns the current time in a specified city.',
  parameters: z.object({
    city: z.string().describe("The name of the city for which to retrieve the current time."),
  }),
  execute: ({city}) => {
    return {status: 'success', report: `The current time in ${city} is 10:30 AM`};
  },
});

export const rootAgent = new LlmAgent({
  name: 'hello_time_agent',
  model: '__MODEL__',
  description: 'Tells the current time in a specified city.',
  instruction: `You are a helpful assistant that tells the current time in a city.
                Use the 'getCurrentTime' tool for this purpose.`,
  tools: [getCurrentTime],
});
"""

_TSCONFIG: dict = {
    "compilerOptions": {
        "target": "esnext",
        "module": "nodenext",
        "rootDir": "./",
        "outDir": "dist",
        "allowUnreachableCode": False,
        "allowUnusedLabels": False,
        "declaration": True,
        "declarationMap": True,
        "esModuleInterop": True,
        "exactOptionalPropertyTypes": True,
        "noEmitOnError": True,
        "noFallthroughCasesInSwitch": True,
        "noImplicitReturns": True,
        "noUncheckedIndexedAccess": True,
        "pretty": True,
        "skipLibCheck": True,
        "sourceMap": True,
        "strict": True,
    }
}


def render_agent(model: str) -> str:
    """Agent source with one example tool and a root agent on model."""
    return _AGENT_TEMPLATE.replace("__MODEL__", model or DEFAULT_MODEL)


def render_env(options: AgentCreationOptions) -> str:
    """Render .env content; only non-empty credentials produce lines."""
    lines: list[str] = []
    if options.api_key:
        lines.append(f"GOOGLE_API_KEY={options.api_key}")
        lines.append("GOOGLE_GENAI_USE_VERTEXAI=0")
    if options.project:
        lines.append(f"GOOGLE_CLOUD_PROJECT={options.project}")
    if options.region:
        lines.append(f"GOOGLE_CLOUD_LOCATION={options.region}")
    if options.project and options.region:
        lines.append("GOOGLE_GENAI_USE_VERTEXAI=1")
    return "\n".join(lines)


def render_package_json(agent_name: str, extension: str) -> str:
    manifest = {
        "name": agent_name,
        "version": "1.0.0",
        "description": "",
        "main": f"agent.{extension}",
        "scripts": {
            "web": f"npx {DEVTOOLS_PACKAGE} web",
            "cli": f"npx {DEVTOOLS_PACKAGE} run agent.{extension}",
        },
        "keywords": [],
        "author": "",
        "license": "ISC",
    }
    return json.dumps(manifest, indent=2)


def render_tsconfig() -> str:
    return json.dumps(_TSCONFIG, indent=2)
