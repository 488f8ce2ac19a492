"""Tests for conventions.layout.ProjectLayoutTemplate"""
import json

import pytest

from conventions.layout import ProjectLayoutTemplate
from core.exceptions import InvalidLayoutError


class TestDefault:
    def test_has_a_placeholder_app_and_core(self):
        template = ProjectLayoutTemplate.default()

        assert [child.name for child in template.root.children] == ["app", "core"]


class TestForApps:
    def test_adds_one_directory_per_app_before_core(self):
        template = ProjectLayoutTemplate.for_apps(["books", "shelves"])

        assert [child.name for child in template.root.children] == ["books", "shelves", "core"]

    @pytest.mark.parametrize("name", ["core", "2books", "class", "Books", "my-app"])
    def test_rejects_names_that_cannot_be_app_packages(self, name):
        with pytest.raises(InvalidLayoutError):
            ProjectLayoutTemplate.for_apps([name])

    def test_rejects_duplicate_names(self):
        with pytest.raises(InvalidLayoutError, match="Duplicate"):
            ProjectLayoutTemplate.for_apps(["books", "books"])

    def test_requires_at_least_one_app(self):
        with pytest.raises(ValueError):
            ProjectLayoutTemplate.for_apps([])


class TestExpectedPaths:
    def test_lists_every_app_module(self):
        paths = ProjectLayoutTemplate.for_apps(["books"]).expected_paths()

        for module in [
            "views.py",
            "models.py",
            "serializers.py",
            "authentication.py",
            "permissions.py",
            "filters.py",
            "urls.py",
        ]:
            assert f"books/{module}" in paths

    def test_lists_every_core_module(self):
        paths = ProjectLayoutTemplate.default().expected_paths()

        for module in ["settings.py", "asgi.py", "wsgi.py", "storage.py"]:
            assert f"core/{module}" in paths

    def test_marks_directories_with_a_trailing_slash(self):
        paths = ProjectLayoutTemplate.default().expected_paths()

        assert "app/" in paths
        assert "app/tests/" in paths
        assert "core/tests/__init__.py" in paths

    def test_is_sorted(self):
        paths = ProjectLayoutTemplate.for_apps(["zoo", "books"]).expected_paths()

        assert paths == sorted(paths)


class TestRender:
    def test_draws_the_tree_with_box_characters(self):
        lines = ProjectLayoutTemplate.default().render().splitlines()

        assert lines[0] == "project_dir/"
        assert lines[1] == "├── app/"
        assert "└── core/" in lines

    def test_describes_each_module(self):
        rendered = ProjectLayoutTemplate.default().render()

        assert "storage.py" in rendered
        assert "file storage classes" in rendered


class TestToDict:
    def test_is_json_serialisable(self):
        data = ProjectLayoutTemplate.for_apps(["books"]).to_dict()

        assert json.loads(json.dumps(data))["apps"] == ["books"]

    def test_nests_children_under_directories(self):
        tree = ProjectLayoutTemplate.default().to_dict()["tree"]

        app = tree["children"][0]
        assert app["type"] == "directory"
        assert {"name": "views.py", "type": "file", "description": "API views"} in app["children"]
