"""
Tests for placeholder expansion.
"""

from hookrunner.core.hooks.expander import PlaceholderExpander


def env(**values):
    return values.get


def test_context_and_environment_placeholders(ctx):
    """Context variables win, unknown names fall back to the environment."""
    expander = PlaceholderExpander(env_lookup=env(CUSTOM="42"))

    assert expander.expand("$FILE-$CUSTOM", ctx) == "/a/b-42"


def test_all_context_variables(ctx):
    expander = PlaceholderExpander(env_lookup=env())

    result = expander.expand("$FILE $SCOPE $TRIGGER $USERNAME $DESTINATION", ctx)

    assert result == "/a/b u1 before_upload alice /c/d"


def test_context_overrides_environment(ctx):
    expander = PlaceholderExpander(env_lookup=env(FILE="/from/env"))

    assert expander.expand("$FILE", ctx) == "/a/b"


def test_braced_placeholder(ctx):
    expander = PlaceholderExpander(env_lookup=env())

    assert expander.expand("${USERNAME}_backup", ctx) == "alice_backup"


def test_unset_variable_expands_to_empty(ctx):
    expander = PlaceholderExpander(env_lookup=env())

    assert expander.expand("pre-$UNSET-post", ctx) == "pre--post"


def test_single_pass_expansion(ctx):
    """Substituted text is not expanded again."""
    expander = PlaceholderExpander(env_lookup=env(CUSTOM="$FILE"))

    assert expander.expand("$CUSTOM", ctx) == "$FILE"


def test_literal_dollar_kept(ctx):
    expander = PlaceholderExpander(env_lookup=env())

    assert expander.expand("cost: 5$", ctx) == "cost: 5$"
    assert expander.expand("a $/b", ctx) == "a $/b"


def test_invalid_brace_syntax_is_consumed(ctx):
    expander = PlaceholderExpander(env_lookup=env())

    assert expander.expand("x${}y", ctx) == "xy"
    assert expander.expand("x${FILE", ctx) == "xFILE"


def test_special_single_character_names(ctx):
    expander = PlaceholderExpander(env_lookup=env(**{"1": "one"}))

    assert expander.expand("$1x", ctx) == "onex"
    assert expander.expand("${1}", ctx) == "one"


def test_program_name_not_expanded(ctx):
    expander = PlaceholderExpander(env_lookup=env(TOOL="/bin/evil"))

    command = expander.expand_command(["$TOOL", "$FILE"], ctx)

    assert command == ["$TOOL", "/a/b"]


def test_empty_arguments_are_dropped(ctx):
    """An argument that expands to nothing disappears from argv."""
    expander = PlaceholderExpander(env_lookup=env())

    command = expander.expand_command(["convert", "$UNSET", "$FILE", "${}"], ctx)

    assert command == ["convert", "/a/b"]


def test_default_lookup_uses_process_environment(ctx, monkeypatch):
    monkeypatch.setenv("HOOKRUNNER_TEST_VALUE", "from-os")
    expander = PlaceholderExpander()

    assert expander.expand("$HOOKRUNNER_TEST_VALUE", ctx) == "from-os"
