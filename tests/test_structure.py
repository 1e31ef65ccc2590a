"""
Structure lint tests
Verify that every component follows the functional core / shell layout.
"""

from pathlib import Path

import yaml

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE = PROJECT_ROOT / "collext"
COMPONENTS = ("merge", "upsert", "template", "ordinal", "uuid", "pluck")
COMPONENT_FILES = ("__init__.py", "_impl.py", "component.py", "models.py")


class TestProjectStructure:
    """Verify project structure follows conventions."""

    def test_core_directories_exist(self) -> None:
        assert (PACKAGE / "components").is_dir()
        assert (PACKAGE / "rules").is_dir()
        assert (PACKAGE / "shell").is_dir()
        assert (PACKAGE / "primitives.py").is_file()

    def test_components_complete(self) -> None:
        """Each component has its core, shell, models and tests."""
        for name in COMPONENTS:
            component = PACKAGE / "components" / name
            for filename in COMPONENT_FILES:
                assert (component / filename).is_file(), f"Missing {filename} in {name}"
            assert (component / "tests" / "test_unit.py").is_file(), f"Missing tests in {name}"

    def test_no_unexpected_components(self) -> None:
        found = {
            entry.name
            for entry in (PACKAGE / "components").iterdir()
            if entry.is_dir() and entry.name != "__pycache__"
        }
        assert found == set(COMPONENTS)

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "regression").is_dir()

    def test_rules_file_is_valid_yaml(self) -> None:
        data = yaml.safe_load((PROJECT_ROOT / "rules.yaml").read_text())
        assert set(data) == {"template", "pluck", "uuid", "logging"}

    def test_core_does_no_io(self) -> None:
        """Functional cores must not touch files, env or logging."""
        forbidden = ("import os", "import logging", "open(", "Path(")
        for name in COMPONENTS:
            source = (PACKAGE / "components" / name / "_impl.py").read_text()
            for token in forbidden:
                assert token not in source, f"{name}/_impl.py uses {token!r}"
