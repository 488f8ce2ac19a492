"""
Project layout template

The expected directory tree of a project following the conventions:
one directory per app plus the core package, each with a tests/ package.
"""
import keyword
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from core.exceptions import InvalidLayoutError

from .catalog import APP_MODULES, CORE_MODULES

PROJECT_DIR = "project_dir"
CORE_PACKAGE = "core"
PLACEHOLDER_APP = "app"

MODULE_DESCRIPTIONS = {
    "views.py": "API views",
    "models.py": "models and their QuerySets",
    "serializers.py": "serializers",
    "authentication.py": "authentication classes",
    "permissions.py": "permission classes",
    "filters.py": "filter backends",
    "urls.py": "URL patterns",
    "settings.py": "settings read from environment variables",
    "asgi.py": "ASGI entry point",
    "wsgi.py": "WSGI entry point",
    "storage.py": "file storage classes",
}


@dataclass
class LayoutNode:
    """A file or directory in the template"""

    name: str
    is_dir: bool = False
    description: str = ""
    children: List["LayoutNode"] = field(default_factory=list)

    @classmethod
    def file(cls, name: str) -> "LayoutNode":
        return cls(name=name, description=MODULE_DESCRIPTIONS.get(name, ""))

    @classmethod
    def directory(cls, name: str, children: Iterable["LayoutNode"] = (), description: str = ""):
        return cls(name=name, is_dir=True, description=description, children=list(children))

    @property
    def label(self) -> str:
        return f"{self.name}/" if self.is_dir else self.name

    def walk(self, prefix: str = "") -> Iterable[Tuple[str, "LayoutNode"]]:
        """Yield (relative path, node) for every descendant, depth first"""
        for child in self.children:
            path = f"{prefix}{child.label}"
            yield path, child
            if child.is_dir:
                yield from child.walk(path)

    def to_dict(self) -> Dict:
        data = {
            "name": self.name,
            "type": "directory" if self.is_dir else "file",
            "description": self.description,
        }
        if self.is_dir:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def _package(name: str, modules: Iterable[str], description: str) -> LayoutNode:
    children = [LayoutNode.file("__init__.py")]
    children.extend(LayoutNode.file(module) for module in modules)
    children.append(
        LayoutNode.directory(
            "tests",
            [LayoutNode.file("__init__.py")],
            description=f"tests mirroring {name}/",
        )
    )
    return LayoutNode.directory(name, children, description=description)


def validate_app_name(name: str) -> str:
    """
    Check that name can be an app package

    Raises:
        InvalidLayoutError: If the name is not a usable package name
    """
    name = (name or "").strip()

    if not name.isidentifier() or keyword.iskeyword(name):
        raise InvalidLayoutError(f"App name '{name}' is not a valid Python identifier")
    if name != name.lower():
        raise InvalidLayoutError(f"App name '{name}' must be lower case")
    if name == CORE_PACKAGE:
        raise InvalidLayoutError(f"App name '{name}' is reserved for the project package")

    return name


class ProjectLayoutTemplate:
    """
    Expected tree for a project with the given apps

    Apps are listed in the order given; core always comes last.
    """

    def __init__(self, app_names: Optional[Iterable[str]] = None, project_dir: str = PROJECT_DIR):
        names = [validate_app_name(name) for name in (app_names or [PLACEHOLDER_APP])]

        if len(set(names)) != len(names):
            raise InvalidLayoutError(f"Duplicate app names in {names}")

        self.app_names = names
        self.project_dir = project_dir
        self.root = LayoutNode.directory(
            project_dir,
            [_package(name, APP_MODULES, description="app") for name in names]
            + [_package(CORE_PACKAGE, CORE_MODULES, description="project package")],
        )

    @classmethod
    def default(cls) -> "ProjectLayoutTemplate":
        return cls()

    @classmethod
    def for_apps(cls, app_names: Iterable[str]) -> "ProjectLayoutTemplate":
        names = list(app_names)
        if not names:
            raise InvalidLayoutError("At least one app name is required")
        return cls(names)

    def expected_paths(self) -> List[str]:
        """Relative POSIX paths of every node; directories end in '/'"""
        return sorted(path for path, _ in self.root.walk())

    def render(self) -> str:
        """Draw the tree with box-drawing characters"""
        lines = [self.root.label]
        lines.extend(self._render_children(self.root, ""))
        return "\n".join(lines)

    def _render_children(self, node: LayoutNode, indent: str) -> List[str]:
        lines = []
        for index, child in enumerate(node.children):
            is_last = index == len(node.children) - 1
            branch = "└── " if is_last else "├── "
            line = f"{indent}{branch}{child.label}"
            if child.description and not child.is_dir:
                line = f"{line:<40} {child.description}"
            lines.append(line.rstrip())
            if child.is_dir:
                lines.extend(self._render_children(child, indent + ("    " if is_last else "│   ")))
        return lines

    def to_dict(self) -> Dict:
        return {
            "project_dir": self.project_dir,
            "apps": list(self.app_names),
            "tree": self.root.to_dict(),
            "paths": self.expected_paths(),
        }
