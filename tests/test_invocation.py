"""Tests for building the java -jar invocation."""

import dataclasses

import pytest

from canteen.invocation import Invocation, build_invocation, jar_path


class TestJarPath:
    """Tests for jar_path()."""

    def test_strips_leading_dot_slash(self):
        """A single leading ./ is removed."""
        assert jar_path("./app") == "app"

    def test_strips_only_one_dot_slash(self):
        """Only the first ./ is removed, a second one is kept."""
        assert jar_path("././app") == "./app"

    def test_path_without_prefix_is_unchanged(self):
        """Paths without a leading ./ pass through unchanged."""
        assert jar_path("app") == "app"
        assert jar_path("/opt/tools/app") == "/opt/tools/app"
        assert jar_path("bin/app") == "bin/app"

    def test_parent_relative_path_is_unchanged(self):
        """../ is not a ./ prefix and is not touched."""
        assert jar_path("../app") == "../app"

    def test_dot_slash_inside_path_is_unchanged(self):
        """Only a leading occurrence counts."""
        assert jar_path("tools/./app") == "tools/./app"

    def test_path_is_not_made_absolute(self, tmp_path, monkeypatch):
        """The jar path stays relative even when it exists."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "app").write_text("")
        assert jar_path("./app") == "app"


class TestBuildInvocation:
    """Tests for build_invocation()."""

    def test_builds_jar_invocation(self):
        """Invocation is -jar, the jar path, then the forwarded arguments."""
        invocation = build_invocation("/usr/bin/java", "./app", ["run", "--fast"])

        assert invocation.java == "/usr/bin/java"
        assert invocation.args == ("-jar", "app", "run", "--fast")

    def test_no_forwarded_arguments(self):
        """With no arguments only -jar and the jar path remain."""
        invocation = build_invocation("java", "app", [])
        assert invocation.args == ("-jar", "app")

    def test_forwarded_arguments_are_not_altered(self):
        """Arguments keep their order, duplicates and exact content."""
        forwarded = ["b", "a", "a", "", "with space", "./x", "-jar", "--"]
        invocation = build_invocation("java", "app", forwarded)

        assert list(invocation.args[2:]) == forwarded

    def test_input_list_is_not_mutated(self):
        """The caller's list is left as it was."""
        forwarded = ["one", "two"]
        build_invocation("java", "./app", forwarded)
        assert forwarded == ["one", "two"]

    def test_invocation_is_immutable(self):
        """Invocations are frozen once built."""
        invocation = build_invocation("java", "app", ["x"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            invocation.java = "other"


class TestInvocationArgv:
    """Tests for Invocation.argv()."""

    def test_argv_prepends_argument_zero(self):
        """argv() puts the given argv0 in front of the arguments."""
        invocation = Invocation(java="/jdk/bin/java", args=("-jar", "app", "x"))
        assert invocation.argv("java") == ["java", "-jar", "app", "x"]
        assert invocation.argv("/jdk/bin/java") == ["/jdk/bin/java", "-jar", "app", "x"]
