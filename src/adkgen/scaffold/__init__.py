"""Agent project scaffolding: folder, prompts, templates, install."""
