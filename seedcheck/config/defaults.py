"""
Built-in checklist for an agentic project seed.

The table is plain data; building it never touches the filesystem.
"""

from typing import Any, Dict, List

from .models import Checklist


AGENT_FILES = [
    ("project-manager", "Project Manager agent"),
    ("backend-developer", "Backend Developer agent"),
    ("frontend-developer", "Frontend Developer agent"),
    ("qa-engineer", "QA Engineer agent"),
    ("devops-engineer", "DevOps Engineer agent"),
    ("documentation-writer", "Documentation Writer agent"),
]

# Minimum sizes in bytes; a file must be strictly larger to pass.
CONTENT_THRESHOLDS = [
    (".github/copilot-instructions.md", 3000, "Copilot instructions"),
    (".github/agents/project-manager.md", 3000, "Project Manager agent"),
    (".github/agents/backend-developer.md", 5000, "Backend Developer agent"),
    (".github/agents/frontend-developer.md", 5000, "Frontend Developer agent"),
    (".github/agents/qa-engineer.md", 5000, "QA Engineer agent"),
    (".github/agents/devops-engineer.md", 5000, "DevOps Engineer agent"),
    (".github/agents/documentation-writer.md", 5000, "Documentation Writer agent"),
    ("README.md", 5000, "README.md"),
    ("USAGE_GUIDE.md", 10000, "USAGE_GUIDE.md"),
]


def _file(path: str, label: str) -> Dict[str, Any]:
    return {"kind": "file", "path": path, "label": label}


def _directory(path: str, label: str) -> Dict[str, Any]:
    return {"kind": "directory", "path": path, "label": label}


def get_default_groups() -> List[Dict[str, Any]]:
    """Get the built-in checklist as raw group dictionaries."""
    return [
        {
            "title": "Core Files",
            "checks": [
                _file("README.md", "README.md exists"),
                _file("USAGE_GUIDE.md", "USAGE_GUIDE.md exists"),
                _file("cookiecutter.json", "cookiecutter.json exists"),
                _file("LICENSE", "LICENSE exists"),
                _file(".gitignore", ".gitignore exists"),
            ],
        },
        {
            "title": "GitHub Configuration",
            "checks": [
                _directory(".github", ".github directory exists"),
                _directory(".github/agents", ".github/agents directory exists"),
                _file(".github/copilot-instructions.md", "GitHub Copilot instructions exist"),
            ],
        },
        {
            "title": "Agent Files",
            "checks": [
                _file(f".github/agents/{name}.md", label)
                for name, label in AGENT_FILES
            ],
        },
        {
            "title": "Template Files",
            "checks": [
                _directory("templates", "templates directory exists"),
                _file("templates/README.md", "Templates README"),
                _file("templates/fullstack-structure.md", "Fullstack structure template"),
                _file("templates/backend-api-structure.md", "Backend API structure template"),
                _file("templates/frontend-spa-structure.md", "Frontend SPA structure template"),
            ],
        },
        {
            "title": "Content Quality",
            "checks": [
                {"kind": "min_size", "path": path, "label": label, "threshold": threshold}
                for path, threshold, label in CONTENT_THRESHOLDS
            ],
        },
    ]


def get_default_checklist() -> Checklist:
    """Get a fresh copy of the built-in checklist."""
    return Checklist(groups=get_default_groups())
