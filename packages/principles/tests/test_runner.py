from __future__ import annotations

from solid_principles.__main__ import DEMOS, main


def test_runner_covers_every_principle():
    assert [title for title, _ in DEMOS] == [
        "Dependency inversion",
        "Interface segregation",
        "Open/closed",
    ]


def test_runner_prints_each_demo_under_its_heading(capsys):
    main()
    out = capsys.readouterr().out

    headings = [out.index(f"=== {title} ===") for title, _ in DEMOS]
    assert headings == sorted(headings)
    assert "Edward has a child named Genevieve" in out
    assert "* PhotoCopier can print, scan" in out
    assert "* Tree is large and green" in out
