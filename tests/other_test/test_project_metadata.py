from __future__ import annotations

import importlib.metadata as importlib_metadata

import tcpconsole

import pytest
import trove_classifiers


@pytest.fixture(scope="module")
def tcpconsole_metadata() -> importlib_metadata.PackageMetadata:
    return importlib_metadata.metadata("tcpconsole")


def test____project____classifiers_all_are_valids(tcpconsole_metadata: importlib_metadata.PackageMetadata) -> None:
    unknown_classifiers = set(tcpconsole_metadata.get_all("Classifier", [])).difference(trove_classifiers.classifiers)

    assert not unknown_classifiers


def test____project____version_matches_package(tcpconsole_metadata: importlib_metadata.PackageMetadata) -> None:
    assert tcpconsole_metadata["Version"] == tcpconsole.__version__


def test____project____console_script_entry_point() -> None:
    # Arrange
    from tcpconsole.cli import main

    entry_points = importlib_metadata.entry_points(group="console_scripts", name="tcpconsole")

    # Act
    (entry_point,) = entry_points

    # Assert
    assert entry_point.load() is main


def test____project____development_status_matches_package(tcpconsole_metadata: importlib_metadata.PackageMetadata) -> None:
    # Arrange
    expected_classifier = {
        "Planning": "Development Status :: 1 - Planning",
        "Development": "Development Status :: 3 - Alpha",
        "Production": "Development Status :: 5 - Production/Stable",
    }[tcpconsole.__status__]

    # Act
    status_classifiers = [c for c in tcpconsole_metadata.get_all("Classifier", []) if c.startswith("Development Status ::")]

    # Assert
    assert status_classifiers == [expected_classifier]
