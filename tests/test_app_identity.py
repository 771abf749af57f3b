from clbuilder.app_identity import AppIdentity
from clbuilder.app_version import AppVersion


def test_new_identity_has_no_author_or_license():
    identity = AppIdentity("Hello World", "A Hello World", AppVersion(0, 0, 0))
    assert identity.name == "Hello World"
    assert identity.description == "A Hello World"
    assert identity.version == AppVersion(0, 0, 0)
    assert identity.author is None
    assert identity.license is None


def test_default_identity():
    identity = AppIdentity()
    assert identity.name == ""
    assert identity.description == ""
    assert identity.version == AppVersion()


def test_written_by_sets_author_and_chains():
    identity = AppIdentity("tool", "does things")
    result = identity.written_by("Jane Doe")
    assert result is identity
    assert identity.author == "Jane Doe"


def test_licensed_with_sets_license_and_chains():
    identity = AppIdentity("tool", "does things")
    result = identity.written_by("Jane Doe").licensed_with("MIT")
    assert result is identity
    assert identity.license == "MIT"
    assert identity.author == "Jane Doe"


def test_default_versions_are_independent():
    first = AppIdentity()
    second = AppIdentity()
    first.version = AppVersion(1, 0, 0)
    assert second.version == AppVersion()