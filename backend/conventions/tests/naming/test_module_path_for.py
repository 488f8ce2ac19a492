"""Tests for conventions.naming.module_path_for"""
import pytest

from conventions.naming import module_path_for


class TestFunction:
    def test_mirrors_the_source_module_under_tests(self):
        assert module_path_for("books/utils.py", "split_names") == "books/tests/utils/test_split_names.py"

    def test_drops_the_view_suffix_from_view_classes(self):
        assert module_path_for("books/views.py", "BookDetailView") == "books/tests/views/test_book_detail.py"

    def test_snake_cases_class_names(self):
        assert (
            module_path_for("books/models.py", "BookQuerySet")
            == "books/tests/models/test_book_query_set.py"
        )

    def test_keeps_nested_packages(self):
        assert (
            module_path_for("books/api/v2/views.py", "BookListView")
            == "books/tests/api/v2/views/test_book_list.py"
        )

    def test_accepts_windows_separators(self):
        assert module_path_for("books\\utils.py", "split_names") == "books/tests/utils/test_split_names.py"

    @pytest.mark.parametrize(
        "source_path",
        ["utils.py", "books/utils.txt", "/abs/books/utils.py", "books/tests/utils.py", "books/test_utils.py"],
    )
    def test_rejects_paths_that_are_not_app_modules(self, source_path):
        with pytest.raises(ValueError):
            module_path_for(source_path, "split_names")

    def test_rejects_package_init_modules(self):
        with pytest.raises(ValueError, match="__init__"):
            module_path_for("books/__init__.py", "default_app_config")

    @pytest.mark.parametrize("subject", ["BookQuerySet.published", "book serializer", "split-names"])
    def test_rejects_a_subject_that_is_not_an_identifier(self, subject):
        with pytest.raises(ValueError, match="not a valid Python identifier"):
            module_path_for("books/utils.py", subject)

    @pytest.mark.parametrize("source_path", ["../utils.py", "books/../utils.py", "my-app/utils.py", "books/my-utils.py"])
    def test_rejects_path_parts_that_are_not_package_or_module_names(self, source_path):
        with pytest.raises(ValueError, match="not a package or module name"):
            module_path_for(source_path, "split_names")
