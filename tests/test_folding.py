from domain.folding import FOLDING, fold, unfold


def test_unfold_without_folds_returns_same_value():
    assert unfold("text/html; level=1") == "text/html; level=1"


def test_unfold_collapses_each_fold_to_one_space():
    assert unfold("text/html;\r\n level=1") == "text/html; level=1"
    assert unfold("a\r\n\tb") == "a b"


def test_unfold_keeps_other_whitespace():
    assert unfold("a  \r\n   b") == "a     b"


def test_fold_without_parts_is_single_line():
    assert fold("text/plain", []) == "text/plain"


def test_fold_puts_every_part_on_its_own_continuation_line():
    out = fold("multipart/mixed", ['boundary="x"', 'charset="utf-8"'])
    assert out == 'multipart/mixed;\r\n boundary="x";\r\n charset="utf-8"'
    assert out.count(FOLDING) == 2


def test_unfold_reverts_fold():
    parts = ['a="1"', 'b="2"', 'c="3"']
    assert unfold(fold("x/y", parts)) == 'x/y; a="1"; b="2"; c="3"'
