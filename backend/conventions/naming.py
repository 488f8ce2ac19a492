"""
Mechanical test naming

Derives where a test lives and what its class is called from the thing
it covers, so the answer never depends on taste:

    split_names in books/utils.py     -> books/tests/utils/test_split_names.py::TestFunction
    BookDetailView.PATCH              -> books/tests/views/test_book_detail.py::TestPatch
    BookQuerySet.published            -> books/tests/models/test_book_query_set.py::TestPublished
"""
import re
import unicodedata
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Dict

from core.exceptions import UnknownSubjectKindError

from .catalog import HTTP_VERBS

FUNCTION = "function"
METHOD = "method"
ENDPOINT = "endpoint"
CLASS = "class"

SUBJECT_KINDS = (FUNCTION, METHOD, ENDPOINT, CLASS)

# Kinds named as Owner.member
MEMBER_KINDS = (METHOD, ENDPOINT)

TESTS_PACKAGE = "tests"


@dataclass(frozen=True)
class TestLocation:
    """Where the tests for one subject live"""

    # Keeps pytest from collecting this class
    __test__ = False

    module_path: str
    class_name: str

    @property
    def node_id(self) -> str:
        return f"{self.module_path}::{self.class_name}"

    def to_dict(self) -> Dict:
        return {
            "module_path": self.module_path,
            "class_name": self.class_name,
            "node_id": self.node_id,
        }


def snake_case(name: str) -> str:
    """BookDetailView -> book_detail_view, HTTPClient -> http_client"""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.replace("-", "_").lower()


def cap_words(name: str) -> str:
    """owned_by -> OwnedBy; already CapWords names are kept"""
    parts = [part for part in name.split("_") if part]
    return "".join(part[0].upper() + part[1:] for part in parts)


def _require_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValueError("A subject name is required")
    return name


def _require_identifier(name: str, what: str) -> str:
    if not name.isidentifier():
        raise ValueError(f"{what} '{name}' is not a valid Python identifier")
    return name


def class_name_for(kind: str, name: str) -> str:
    """
    Name of the test class covering a subject

    Args:
        kind: One of 'function', 'method', 'endpoint', 'class'
        name: The function, method or class name, or the HTTP verb for
            an endpoint

    Raises:
        UnknownSubjectKindError: If kind is not a known subject kind
        ValueError: If name is empty or not a valid HTTP verb for an endpoint
    """
    if kind not in SUBJECT_KINDS:
        raise UnknownSubjectKindError(kind, SUBJECT_KINDS)

    name = _require_name(name)
    if kind != ENDPOINT:
        _require_identifier(name, f"The {kind} name")

    if kind == FUNCTION:
        return "TestFunction"

    if kind == ENDPOINT:
        verb = name.upper()
        if verb not in HTTP_VERBS:
            raise ValueError(
                f"Invalid HTTP verb '{name}'. Must be one of: {', '.join(HTTP_VERBS)}"
            )
        return f"Test{verb.capitalize()}"

    if kind == METHOD:
        words = cap_words(name)
        if not words:
            raise ValueError(f"Method name '{name}' has no letters to name a class after")
        return f"Test{words}"

    return f"Test{name[0].upper()}{name[1:]}"


def module_path_for(source_path: str, subject: str) -> str:
    """
    Path of the test module for a subject defined in source_path

    The source module becomes a directory under the app's tests package
    and the subject becomes the file name. A trailing View is dropped
    from view classes.

    Raises:
        ValueError: If source_path is not a module inside an app package,
            is itself a test module, or subject is not an identifier
    """
    subject = _require_identifier(_require_name(subject), "Subject")
    path = PurePosixPath(source_path.strip().replace("\\", "/"))

    if path.is_absolute():
        raise ValueError(f"Source path '{source_path}' must be relative to the project directory")
    if path.suffix != ".py":
        raise ValueError(f"Source path '{source_path}' must be a Python module")
    if len(path.parts) < 2:
        raise ValueError(f"Source path '{source_path}' must be inside an app package")
    if TESTS_PACKAGE in path.parts[:-1] or path.name.startswith("test_"):
        raise ValueError(f"Source path '{source_path}' is already a test module")
    if path.stem == "__init__":
        raise ValueError("Tests for package __init__ modules have no mirrored location")
    for part in (*path.parent.parts, path.stem):
        if not part.isidentifier():
            raise ValueError(
                f"Source path '{source_path}' has '{part}', which is not a package or module name"
            )

    app, *packages = path.parent.parts

    if subject[0].isupper() and subject.endswith("View") and len(subject) > len("View"):
        subject = subject[: -len("View")]

    test_path = PurePosixPath(app, TESTS_PACKAGE, *packages, path.stem, f"test_{snake_case(subject)}.py")
    return str(test_path)


def proposition_to_test_name(sentence: str) -> str:
    """
    Turn a proposition into a test function name

    "Returns 404 when the book is missing." -> test_returns_404_when_the_book_is_missing

    Raises:
        ValueError: If the sentence has no words
    """
    # café -> cafe; letters outside ASCII that do not decompose are kept
    decomposed = unicodedata.normalize("NFKD", (sentence or "").lower())
    letters = "".join(char for char in decomposed if not unicodedata.combining(char))
    words = re.sub(r"[\W_]+", " ", letters).split()

    if words and words[0] == "test":
        words = words[1:]

    if not words:
        raise ValueError("A proposition needs at least one word")

    name = "test_" + "_".join(words)
    if not name.isidentifier():
        raise ValueError(f"Proposition '{sentence}' does not make a valid test name")
    return name


def describe_test_location(source_path: str, kind: str, name: str) -> TestLocation:
    """
    Full location of the tests for a subject

    Args:
        source_path: Module defining the subject, e.g. 'books/views.py'
        kind: One of 'function', 'method', 'endpoint', 'class'
        name: 'split_names' for functions, 'BookSerializer' for classes,
            'Owner.member' for methods ('BookQuerySet.published') and
            endpoints ('BookDetailView.PATCH')

    Raises:
        UnknownSubjectKindError: If kind is not a known subject kind
        ValueError: If name or source_path is malformed
    """
    if kind not in SUBJECT_KINDS:
        raise UnknownSubjectKindError(kind, SUBJECT_KINDS)

    name = _require_name(name)

    if kind in MEMBER_KINDS:
        owner, _, member = name.partition(".")
        if not owner or not member:
            raise ValueError(f"A {kind} must be given as Owner.member, got '{name}'")
        subject = owner
    else:
        member = name
        subject = name

    return TestLocation(
        module_path=module_path_for(source_path, subject),
        class_name=class_name_for(kind, member),
    )
