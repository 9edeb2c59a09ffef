import io

import pytest

from forkcons.prodcons import (
    DataItem,
    InputError,
    SharedState,
    consumer_count,
    format_item,
    main,
    parse_items,
    run,
)


def test_consumer_count_defaults_to_one():
    assert consumer_count([], 4) == 1


@pytest.mark.parametrize("arg, cores, expected", [("1", 4, 1), ("4", 4, 4), ("3", 8, 3)])
def test_consumer_count_accepts_range(arg, cores, expected):
    assert consumer_count([arg], cores) == expected


@pytest.mark.parametrize("arg", ["0", "5", "-1", "abc"])
def test_consumer_count_rejects_out_of_range(arg):
    with pytest.raises(InputError):
        consumer_count([arg], 4)


def test_consumer_count_rejects_extra_arguments():
    with pytest.raises(InputError):
        consumer_count(["1", "2"], 4)


def test_parse_items_reads_pairs_in_order():
    items = list(parse_items("3 abc\n1 x\n0 y\n"))
    assert items == [DataItem(3, "abc"), DataItem(1, "x"), DataItem(0, "y")]


def test_parse_items_number_glued_to_word():
    assert list(parse_items("2abc\n")) == [DataItem(2, "abc")]


def test_parse_items_empty_or_leading_newline():
    assert list(parse_items("")) == []
    assert list(parse_items("\n3 abc\n")) == []


def test_parse_items_missing_word():
    with pytest.raises(InputError):
        list(parse_items("3 abc\n4\n"))


def test_parse_items_non_number_token():
    gen = parse_items("1 a\nxyz b\n")
    assert next(gen) == DataItem(1, "a")
    with pytest.raises(InputError):
        next(gen)


def test_format_item_repeats_word():
    assert format_item(DataItem(3, "ab"), 2) == "Thread 2: ab ab ab"


def test_format_item_zero_count():
    assert format_item(DataItem(0, "ab"), 1) == "Thread 1:"


@pytest.mark.parametrize("item", [DataItem(-1, "a"), DataItem(2, "5x"), DataItem(1, "-3")])
def test_format_item_rejects_invalid(item):
    with pytest.raises(InputError):
        format_item(item, 1)


def test_format_item_zero_prefix_word_allowed():
    assert format_item(DataItem(1, "0abc"), 1) == "Thread 1: 0abc"


def test_shared_state_rejects_no_consumers():
    with pytest.raises(InputError):
        SharedState(0)


def test_shared_state_starts_clean():
    state = SharedState(3)
    assert (state.consumers, len(state.queue), state.terminate, state.cancel, state.failed) == (
        3,
        0,
        False,
        False,
        False,
    )


def test_run_single_consumer_keeps_order():
    out = io.StringIO()
    assert run("2 a\n1 b\n", out, 1) == 0
    assert out.getvalue() == "Thread 1: a a\nThread 1: b\n"


def test_run_many_consumers_prints_every_item():
    text = "".join(f"{n % 3} w{chr(97 + n % 26)}\n" for n in range(40))
    out = io.StringIO()
    assert run(text, out, 4) == 0
    lines = out.getvalue().splitlines()
    assert len(lines) == 40
    assert all(line.startswith("Thread ") for line in lines)
    ids = {int(line.split(":")[0].split()[1]) for line in lines}
    assert ids <= {1, 2, 3, 4}
    bodies = sorted(line.split(":", 1)[1] for line in lines)
    expected = sorted(
        format_item(item, 1).split(":", 1)[1] for item in parse_items(text)
    )
    assert bodies == expected


def test_run_invalid_item_fails_but_prints_others():
    out = io.StringIO()
    assert run("1 a\n1 7\n1 b\n", out, 1) == 1
    assert out.getvalue() == "Thread 1: a\nThread 1: b\n"


def test_run_bad_input_fails_after_valid_items():
    out = io.StringIO()
    assert run("1 a\nbad\n", out, 2) == 1
    assert out.getvalue().splitlines()[0].endswith(": a")


def test_run_empty_input_succeeds():
    out = io.StringIO()
    assert run("", out, 2) == 0
    assert out.getvalue() == ""


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 hi\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Thread 1: hi hi\n"


def test_main_rejects_bad_argument(capsys):
    assert main(["0"]) == 1
    assert "invalid number of consuments" in capsys.readouterr().err