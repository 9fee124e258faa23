import pytest

from cafe.components import prompts


def test_read_choice_retries_until_number(feed, capsys):
    feed(["abc", "", "4"])
    assert prompts.read_choice() == 4
    assert capsys.readouterr().out.count("Your input is invalid!") == 2


def test_read_nonempty(feed):
    feed(["", "  ", "secret"])
    assert prompts.read_nonempty("pw: ") == "secret"


def test_read_int(feed):
    feed(["seven", "7"])
    assert prompts.read_int("id: ") == 7


def test_read_price_rejects_text_and_negatives(feed, capsys):
    feed(["free", "-2", "nan", "inf", "3.25"])
    assert prompts.read_price("price: ") == 3.25
    out = capsys.readouterr().out
    assert "Not a valid price: 'free'" in out
    assert "negative" in out
    assert "Not a valid price: 'nan'" in out
    assert "Not a valid price: 'inf'" in out


@pytest.mark.parametrize("answers,expected", [(["y"], True), (["N"], False), (["maybe", "Y"], True)])
def test_ask_yes_no(feed, answers, expected):
    feed(answers)
    assert prompts.ask_yes_no("more? ") is expected


def test_eof_propagates(feed):
    feed([])
    with pytest.raises(EOFError):
        prompts.read_choice()
