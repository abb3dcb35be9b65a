from __future__ import annotations

from grg.core.report import print_report, render_report, resolve_all
from grg.core.resolve import ResolutionOutcome


def test_render_successes_only():
    outcomes = [
        ResolutionOutcome("github.com/a/b", line="require github.com/a/b v1.0.0"),
        ResolutionOutcome("github.com/c/d", line="require github.com/c/d v0.2.0"),
    ]
    assert render_report(outcomes) == [
        "",
        "require github.com/a/b v1.0.0",
        "require github.com/c/d v0.2.0",
    ]


def test_render_errors_before_successes_in_input_order():
    outcomes = [
        ResolutionOutcome("z.org/late/err", error="boom"),
        ResolutionOutcome("github.com/a/b", line="require github.com/a/b v1.0.0"),
        ResolutionOutcome("a.org/early/err", error="bang"),
    ]
    assert render_report(outcomes) == [
        "",
        "The following errors were found:",
        "  z.org/late/err: boom",
        "  a.org/early/err: bang",
        "",
        "require github.com/a/b v1.0.0",
    ]


def test_resolve_all_keeps_going_after_failure(fake_git):
    git = fake_git(tag="v1.0.0")
    outcomes = resolve_all(["bad-identifier", "github.com/owner/name"], git)

    assert [o.ok for o in outcomes] == [False, True]
    assert outcomes[1].line == "require github.com/owner/name v1.0.0"


def test_print_report_is_plain_text(capsys):
    print_report([ResolutionOutcome("github.com/[x]/y", line="require github.com/[x]/y v1.0.0")])
    assert capsys.readouterr().out == "\nrequire github.com/[x]/y v1.0.0\n"


def test_print_report_keeps_emoji_codes_literal(capsys):
    print_report(
        [
            ResolutionOutcome("example.org/owner/:smile:", error="fatal: :x: denied"),
            ResolutionOutcome("example.org/owner/:rocket:", line="require example.org/owner/:rocket: v1.0.0"),
        ]
    )
    assert capsys.readouterr().out == (
        "\n"
        "The following errors were found:\n"
        "  example.org/owner/:smile:: fatal: :x: denied\n"
        "\n"
        "require example.org/owner/:rocket: v1.0.0\n"
    )
