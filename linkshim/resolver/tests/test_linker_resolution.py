import pytest

from linkshim.resolver import ResolverStage, resolve_linker_executable
from linkshim.resolver.errors import LinkerNotFoundError


@pytest.mark.parametrize("position", [0, 1, 2])
def test_single_existing_candidate_is_selected(layout, filesystem, position) -> None:
    candidate = layout.linker_candidate_paths[position]
    filesystem.files = {candidate}

    assert resolve_linker_executable(layout, filesystem) == candidate
    # Same filesystem state, same answer
    assert resolve_linker_executable(layout, filesystem) == candidate


def test_primary_candidate_has_priority(layout, filesystem) -> None:
    filesystem.files = set(layout.linker_candidate_paths)
    assert resolve_linker_executable(layout, filesystem) == layout.linker_candidate_paths[0]


def test_probing_stops_at_first_hit(layout, filesystem) -> None:
    filesystem.files = set(layout.linker_candidate_paths[1:])
    resolve_linker_executable(layout, filesystem)
    assert filesystem.probed_files == list(layout.linker_candidate_paths[:2])


def test_no_candidate_exists(layout, filesystem) -> None:
    filesystem.files = set()
    with pytest.raises(LinkerNotFoundError) as exc_info:
        resolve_linker_executable(layout, filesystem)

    error = exc_info.value
    assert error.stage == ResolverStage.RESOLVING_LINKER
    assert error.probed_paths == layout.linker_candidate_paths
    assert filesystem.probed_files == list(layout.linker_candidate_paths)
    for path in layout.linker_candidate_paths:
        assert str(path) in repr(error)


def test_directory_is_not_a_linker(layout, filesystem) -> None:
    filesystem.files = set()
    filesystem.directories.add(layout.linker_candidate_paths[0])
    with pytest.raises(LinkerNotFoundError):
        resolve_linker_executable(layout, filesystem)
