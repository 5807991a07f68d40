from a11y_demos.report import CliReporter, issue_totals, render_results
from a11y_demos.schema import Pa11yIssue, RunResult


def _issue(type_, code="WCAG2AA.x", message="Something is wrong"):
    return Pa11yIssue(
        code=code,
        type=type_,
        message=message,
        context="<img src=\"logo.png\">",
        selector="html > body > img",
    )


def test_render_issue_block_and_totals():
    result = RunResult(pageUrl="ignored", issues=[
        _issue("error", message="Img element missing an alt attribute."),
        _issue("notice"),
        _issue("error"),
    ])
    text = render_results(result, "file:///work/demos/local/test.html")

    assert text.startswith("\nResults for URL: file:///work/demos/local/test.html\n")
    assert " • Error: Img element missing an alt attribute.\n" in text
    assert "   ├── WCAG2AA.x\n   ├── html > body > img\n   └── <img src=\"logo.png\">" in text
    assert " • Notice: Something is wrong" in text
    assert text.endswith("2 Errors\n1 Notices")
    assert "Warnings" not in text
    assert "No issues found!" not in text


def test_render_no_issues():
    text = render_results(RunResult(pageUrl="x", issues=[]), "file:///t.html")
    assert text == "\nResults for URL: file:///t.html\n\nNo issues found!"


def test_totals_order_and_zero_counts_skipped():
    result = RunResult(pageUrl="x", issues=[_issue("notice"), _issue("warning"), _issue("notice")])
    assert issue_totals(result) == [("Warnings", 1), ("Notices", 2)]


def test_reporter_writes_to_stdout(capsys):
    CliReporter().results(RunResult(pageUrl="x", issues=[]), "file:///t.html")
    out = capsys.readouterr().out
    assert "Results for URL: file:///t.html" in out
    assert "No issues found!" in out
