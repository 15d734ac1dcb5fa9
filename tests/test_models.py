"""Unit tests for the pydantic models (webstarter.models)."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from webstarter.models import Choice, FileEntry, Module, ProjectDescriptor, Stage

pytestmark = pytest.mark.unit


class TestChoice:
    def test_defaults(self):
        choice = Choice(prompt="Plain")
        assert choice.directories == ()
        assert choice.files == ()
        assert choice.uses_project_root is True
        assert choice.snippet is None
        assert choice.override_public_subdir is None
        assert choice.override_index_filename is None

    def test_frozen(self):
        choice = Choice(prompt="Plain")
        with pytest.raises(ValidationError):
            choice.snippet = "<p>"

    def test_file_entry_frozen(self):
        entry = FileEntry(payload="x", destination="a.txt")
        assert entry.remote is False
        with pytest.raises(ValidationError):
            entry.remote = True


class TestModule:
    def test_single_when_default_label_set(self):
        module = Module(prompt="Q", default_label="No", choices=(Choice(prompt="Yes"),))
        assert module.is_single
        assert module.labels == ["Yes"]

    def test_multi_without_default_label(self):
        module = Module(prompt="Q", choices=(Choice(prompt="a"), Choice(prompt="b")))
        assert not module.is_single
        assert module.labels == ["a", "b"]

    def test_requires_at_least_one_choice(self):
        with pytest.raises(ValidationError):
            Module(prompt="Q", choices=())


class TestProjectDescriptor:
    def test_defaults(self):
        project = ProjectDescriptor(name="demo", root=Path("demo"))
        assert project.public_subdir == ""
        assert project.index_filename == "index.html"
        assert project.snippet == ""

    def test_public_path_without_subdir_is_root(self):
        project = ProjectDescriptor(name="demo", root=Path("demo"))
        assert project.public_path == Path("demo")
        assert project.index_path == Path("demo/index.html")

    def test_public_path_with_subdir(self):
        project = ProjectDescriptor(name="demo", root=Path("demo"), public_subdir="public")
        assert project.index_path == Path("demo/public/index.html")

    def test_base_path(self):
        project = ProjectDescriptor(name="demo", root=Path("demo"), public_subdir="public")
        assert project.base_path(Choice(prompt="r")) == Path("demo")
        assert project.base_path(
            Choice(prompt="p", uses_project_root=False)
        ) == Path("demo/public")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ProjectDescriptor(name="", root=Path("x"))


class TestStage:
    def test_values(self):
        assert Stage.INIT.value == "init"
        assert Stage.FAILED.value == "failed"
