"""Tests for cmdhelp.model — summaries, paths and flag scopes."""

import sys

import pytest

from cmdhelp.model import Application, Context, Flag, Node, Positional


class TestPositional:
    """Positional usage forms."""

    @pytest.mark.parametrize("kwargs,expected", [
        ({}, "<file>"),
        ({"required": False}, "[<file>]"),
        ({"cumulative": True}, "<file> ..."),
        ({"required": False, "cumulative": True}, "[<file> ...]"),
    ])
    def test_summary(self, kwargs, expected):
        assert Positional("file", **kwargs).summary() == expected


class TestFlag:
    """Flag placeholders and usage forms."""

    def test_bool_summary(self):
        assert Flag("force", is_bool=True).summary() == "--force"

    def test_value_summary(self):
        assert Flag("out", placeholder="PATH").summary() == "--out=PATH"

    def test_placeholder_beats_default(self):
        assert Flag("out", placeholder="PATH", default="a.txt").format_placeholder() == "PATH"

    def test_empty_string_default_ignored(self):
        assert Flag("out", default="").format_placeholder() == "OUT"

    def test_false_default_used(self):
        assert Flag("retries", default=0).format_placeholder() == "0"


class TestTree:
    """Paths, leaves and lookup."""

    def test_root_path_is_name(self, git_like_app):
        assert git_like_app.path() == "vcs"

    def test_nested_path(self, git_like_app):
        add = git_like_app.find("remote add")
        assert add.path() == "remote add"

    def test_leaves_skip_hidden(self, git_like_app):
        assert [c.name for c in git_like_app.leaves()] == ["init", "remote"]

    @pytest.mark.parametrize("path", ["remote add", "remote.add", ["remote", "add"]])
    def test_find_forms(self, git_like_app, path):
        assert git_like_app.find(path).name == "add"

    def test_find_hidden(self, git_like_app):
        assert git_like_app.find("gc").hidden is True

    def test_find_missing(self, git_like_app):
        assert git_like_app.find("remote nope") is None

    def test_constructor_children_get_parent(self):
        child = Node("run")
        app = Application("app", children=[child])
        assert child.parent is app
        assert child.path() == "run"

    def test_is_app(self, git_like_app):
        assert git_like_app.is_app is True
        assert git_like_app.find("init").is_app is False

    def test_walk_visits_everything(self, git_like_app):
        names = [node.name for node in git_like_app.walk()]
        assert names == ["vcs", "init", "remote", "add", "gc"]

    def test_default_stdout(self):
        assert Application("app").stdout is sys.stdout


class TestFlagScopes:
    """Inherited flag groups."""

    def test_groups_from_root_down(self, git_like_app):
        add = git_like_app.find("remote add")
        groups = [[f.name for f in group] for group in add.all_flags()]
        assert groups == [["help", "repo-dir"], ["dry-run"], ["fetch"]]

    def test_empty_groups_dropped(self, git_like_app):
        init = git_like_app.find("init")
        assert [[f.name for f in g] for g in init.all_flags()] == [["help", "repo-dir"]]

    def test_hide_drops_hidden(self):
        app = Application("app", flags=[Flag("secret", hidden=True)])
        assert app.all_flags() == [[app.flags[0]]]
        assert app.all_flags(hide=True) == []


class TestSummary:
    """Machine-derived usage lines."""

    def test_root_summary(self, git_like_app):
        assert git_like_app.summary() == "vcs <command> [flags]"

    def test_group_summary(self, git_like_app):
        assert git_like_app.find("remote").summary() == "remote <command> [flags]"

    def test_leaf_summary(self, git_like_app):
        add = git_like_app.find("remote add")
        assert add.summary() == "remote add <name> <url> [flags]"

    def test_required_flags_listed(self):
        app = Application("app",
                          flags=[Flag("token", required=True, placeholder="TOKEN")],
                          children=[Node("sync")])
        assert app.summary() == "app --token=TOKEN <command>"

    def test_bare_command(self):
        app = Application("app", children=[Node("run")])
        assert app.find("run").summary() == "run"

    def test_hidden_flags_do_not_add_flags_marker(self):
        app = Application("app", flags=[Flag("debug", is_bool=True, hidden=True)])
        assert app.summary() == "app"


class TestContext:
    """Selection and the empty-model check."""

    def test_empty_without_commands(self):
        assert Context(Application("app")).empty() is True

    def test_not_empty_with_commands(self, git_like_app):
        assert Context(git_like_app).empty() is False

    def test_hidden_command_still_counts(self):
        app = Application("app", children=[Node("internal", hidden=True)])
        assert Context(app).empty() is False

    def test_selected_defaults_to_none(self, git_like_app):
        assert Context(git_like_app).selected is None
