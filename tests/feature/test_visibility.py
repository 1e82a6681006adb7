from finspect.feature import Visibility


def test_declared_order():
    assert Visibility.PUBLIC < Visibility.PROTECTED < Visibility.PRIVATE < Visibility.DEFAULT
    assert sorted([Visibility.DEFAULT, Visibility.PRIVATE, Visibility.PUBLIC, Visibility.PROTECTED]) == [
        Visibility.PUBLIC, Visibility.PROTECTED, Visibility.PRIVATE, Visibility.DEFAULT,
    ]


def test_parse_is_case_insensitive():
    assert Visibility.parse("public") is Visibility.PUBLIC
    assert Visibility.parse("Protected") is Visibility.PROTECTED
    assert Visibility.parse(" PRIVATE ") is Visibility.PRIVATE


def test_parse_defaults():
    assert Visibility.parse(None) is Visibility.DEFAULT
    assert Visibility.parse("") is Visibility.DEFAULT
    assert Visibility.parse("install") is Visibility.DEFAULT


def test_unknown_is_alias_of_default():
    assert Visibility.UNKNOWN is Visibility.DEFAULT
    assert Visibility.parse("unknown") is Visibility.DEFAULT


def test_indicators_are_distinct():
    glyphs = [v.indicator for v in Visibility]
    assert len(set(glyphs)) == len(glyphs) == 4
    assert Visibility.PUBLIC.indicator == "+"
