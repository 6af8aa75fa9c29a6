import threading

import pytest

from vfsname.core.name import FileName
from vfsname.core.scope import NameScope
from vfsname.utils.errors import EscapesRootError, InvalidDescendentNameError


class CountingProvider:
    """Provider that records how often the root URI hook runs."""

    def __init__(self, root_uri: str = "mem://store/"):
        self.root_uri = root_uri
        self.root_uri_calls = 0

    def build_root_uri(self, scheme: str) -> str:
        self.root_uri_calls += 1
        return self.root_uri

    def create_name(self, scheme: str, absolute_path: str) -> FileName:
        return FileName(scheme, absolute_path, self, self)


def test_depth(local):
    assert local.name("/").depth == 0
    assert local.name("/a").depth == 1
    assert local.name("/a/b").depth == 2
    assert local.name("/a/b/c").depth == 3


def test_parent(local):
    assert local.name("/").parent is None
    assert local.name("/a/b").parent.path == "/a"
    assert local.name("/a").parent.path == "/"


def test_parent_keeps_concrete_kind_and_scheme(ftp):
    parent = ftp.name("/pub/file.txt").parent

    assert type(parent).__name__ == "GenericFileName"
    assert parent.scheme == "ftp"
    assert parent.uri == "ftp://user@example.com/pub"


def test_base_name(local):
    assert local.name("/a/b/file.txt").base_name == "file.txt"
    assert local.name("/").base_name == ""


def test_extension_is_the_part_before_the_last_dot(local):
    assert local.name("/a/archive.tar.gz").extension == "archive.tar"
    assert local.name("/a/file.txt").extension == "file"
    assert local.name("/a/README").extension == ""
    assert local.name("/a/trailing.").extension == ""


def test_root_uri_strips_one_trailing_separator():
    provider = CountingProvider("mem://store//")
    name = FileName("mem", "/a", provider, provider)

    assert name.root_uri == "mem://store/"
    assert name.uri == "mem://store//a"


def test_uri(local, ftp):
    assert local.name("/tmp/x").uri == "file:///tmp/x"
    assert local.name("/").uri == "file:///"
    assert ftp.name("/pub").uri == "ftp://user@example.com/pub"
    assert str(ftp.name("/pub")) == "ftp://user@example.com/pub"


def test_derived_attributes_are_computed_once():
    provider = CountingProvider()
    name = FileName("mem", "/a/b", provider, provider)

    assert name.uri == "mem://store/a/b"
    assert name.root_uri == "mem://store"
    assert hash(name) == hash(name)
    assert provider.root_uri_calls == 1


def test_concurrent_first_access_yields_one_value():
    provider = CountingProvider()
    name = FileName("mem", "/a/b", provider, provider)
    results = []

    def read():
        results.append(name.uri)

    threads = [threading.Thread(target=read) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert set(results) == {"mem://store/a/b"}


class TestResolveName:
    def test_relative_name_is_resolved_against_base(self, local):
        base = local.name("/usr/local")
        assert base.resolve_name("bin/tool").path == "/usr/local/bin/tool"

    def test_absolute_name_is_resolved_from_root(self, local):
        base = local.name("/usr/local")
        assert base.resolve_name("/etc/hosts").path == "/etc/hosts"

    def test_empty_and_dot_resolve_to_self(self, local):
        base = local.name("/usr/local")
        assert base.resolve_name("").path == "/usr/local"
        assert base.resolve_name(".").path == "/usr/local"

    def test_parent_segments_are_collapsed(self, local):
        base = local.name("/usr/local/bin")
        assert base.resolve_name("../../share").path == "/usr/share"

    def test_backslashes_are_fixed(self, local):
        base = local.name("/usr")
        assert base.resolve_name("local\\bin").path == "/usr/local/bin"

    def test_resolving_from_root(self, local):
        root = local.name("/")
        assert root.resolve_name("a/b").path == "/a/b"
        with pytest.raises(EscapesRootError):
            root.resolve_name("..")

    def test_result_shares_scheme_and_root(self, ftp):
        resolved = ftp.name("/pub").resolve_name("docs")
        assert resolved.scheme == "ftp"
        assert resolved.root_uri == "ftp://user@example.com"

    def test_scope_violation_reports_the_raw_name(self, local):
        base = local.name("/a")
        with pytest.raises(InvalidDescendentNameError) as excinfo:
            base.resolve_name("../b", NameScope.DESCENDENT)

        assert excinfo.value.name == "../b"
        assert "invalid-descendent-name" in str(excinfo.value)

    def test_child_scope(self, local):
        base = local.name("/a")
        assert base.resolve_name("b", NameScope.CHILD).path == "/a/b"
        with pytest.raises(InvalidDescendentNameError):
            base.resolve_name("b/c", NameScope.CHILD)
        with pytest.raises(InvalidDescendentNameError):
            base.resolve_name(".", NameScope.CHILD)

    def test_descendent_or_self_scope(self, local):
        base = local.name("/a")
        assert base.resolve_name(".", NameScope.DESCENDENT_OR_SELF).path == "/a"
        assert base.resolve_name("b/c", NameScope.DESCENDENT_OR_SELF).path == "/a/b/c"

    def test_escaping_root_fails(self, local):
        base = local.name("/a")
        with pytest.raises((EscapesRootError, InvalidDescendentNameError)):
            base.resolve_name("../../escape", NameScope.DESCENDENT)

    def test_escaping_root_propagates_normaliser_error(self, local):
        base = local.name("/a")
        with pytest.raises(EscapesRootError):
            base.resolve_name("../../escape")


class TestRelativeName:
    @pytest.mark.parametrize(
        "base, target, expected",
        [
            ("/usr/local", "/usr/local/bin/tool", "bin/tool"),
            ("/usr/local/bin", "/usr/share", "../../share"),
            ("/", "/", "."),
            ("/", "/a/b", "a/b"),
            ("/a/b", "/a/b", "."),
            ("/a/b/c", "/a", "../.."),
            ("/a/b", "/", "../.."),
            ("/a/bc", "/a/b", "../b"),
            ("/a/b", "/a/bc", "../bc"),
            ("/ab", "/a", "../a"),
            ("/a", "/b", "../b"),
        ],
    )
    def test_relative_name(self, local, base, target, expected):
        assert local.name(base).relative_name(local.name(target)) == expected

    @pytest.mark.parametrize("target", ["/a", "/a/b", "/a/b/c/d"])
    @pytest.mark.parametrize("base", ["/", "/a"])
    def test_round_trip_through_resolve(self, local, base, target):
        base_name = local.name(base)
        target_name = local.name(target)
        assert base_name.is_descendent(target_name, NameScope.DESCENDENT_OR_SELF)

        assert base_name.resolve_name(base_name.relative_name(target_name)) == target_name

    def test_round_trip_for_divergent_names(self, local):
        base = local.name("/usr/local/bin")
        target = local.name("/usr/share/doc")
        assert base.resolve_name(base.relative_name(target)) == target


class TestScopePredicates:
    def test_is_descendent(self, local):
        a = local.name("/a")
        assert a.is_descendent(local.name("/a/b"), NameScope.CHILD)
        assert not a.is_descendent(local.name("/a/b/c"), NameScope.CHILD)
        assert a.is_descendent(local.name("/a/b/c"), NameScope.DESCENDENT)
        assert a.is_descendent(local.name("/a/b/c"))
        assert not a.is_descendent(a)
        assert a.is_descendent(a, NameScope.DESCENDENT_OR_SELF)

    def test_is_ancestor(self, local):
        leaf = local.name("/a/b/c")
        assert leaf.is_ancestor(local.name("/a"))
        assert leaf.is_ancestor(local.name("/"))
        assert not leaf.is_ancestor(leaf)
        assert not leaf.is_ancestor(local.name("/a/bc"))

    def test_different_file_systems_are_never_related(self, local, ftp):
        assert not local.name("/a").is_descendent(ftp.name("/a/b"))
        assert not ftp.name("/a/b").is_ancestor(local.name("/a"))


class TestEquality:
    def test_same_root_and_path_are_equal(self, local):
        first = local.name("/a/b")
        second = local.name("/a/./b/")
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_different_path_is_not_equal(self, local):
        assert local.name("/a/b") != local.name("/a/c")

    def test_different_root_is_not_equal(self, local, ftp):
        assert local.name("/a") != ftp.name("/a")

    def test_comparison_with_other_types(self, local):
        assert local.name("/a") != "file:///a"

    def test_repr(self, local):
        assert repr(local.name("/a")) == "LocalFileName('file:///a')"
