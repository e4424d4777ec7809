import pytest

from update_version_info import VersionInfo


@pytest.mark.parametrize(
    "components",
    [(0, 0, 0, 0), (1, 0, 0, 0), (2, 1, 5, 7), (10, 20, 300, 4000)],
)
def test_renderings_join_components_in_order(components):
    version = VersionInfo(*components)

    assert version.full == ".".join(str(part) for part in components)
    assert version.short == ".".join(str(part) for part in components[:2])
    assert version.bundle_version == ".".join(str(part) for part in components[2:])
    assert str(version) == version.full


def test_version_is_immutable():
    version = VersionInfo(1, 2, 3, 4)

    with pytest.raises(AttributeError):
        version.major = 5
