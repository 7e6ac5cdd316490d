import pytest

from slosh.parser import MAX_ARGS, CommandKind, classify, parse_input


def test_parse_splits_on_whitespace():
    assert parse_input("ls  -l\t/tmp\n") == ["ls", "-l", "/tmp"]


def test_parse_empty_and_blank_lines():
    assert parse_input("") == []
    assert parse_input(" \t \n") == []


def test_parse_carriage_return_is_not_a_delimiter():
    assert parse_input("echo hi\r\n") == ["echo", "hi\r"]


def test_parse_limits_argument_count():
    words = [f"w{i}" for i in range(MAX_ARGS + 10)]
    result = parse_input(" ".join(words))
    assert len(result) == MAX_ARGS - 1
    assert result == words[: MAX_ARGS - 1]


def test_classify_simple():
    cmd = classify(["echo", "hello"])
    assert cmd.kind is CommandKind.SIMPLE
    assert cmd.argv == ["echo", "hello"]
    assert cmd.filename is None


def test_classify_pipe_uses_last_bar():
    cmd = classify(["a", "|", "b", "|", "c", "d"])
    assert cmd.kind is CommandKind.PIPE
    assert cmd.argv == ["a", "|", "b"]
    assert cmd.right == ["c", "d"]


def test_pipe_takes_precedence_over_redirect():
    cmd = classify(["a", ">", "f", "|", "b"])
    assert cmd.kind is CommandKind.PIPE
    assert cmd.argv == ["a", ">", "f"]
    assert cmd.right == ["b"]


@pytest.mark.parametrize(
    "token, clobber", [(">", True), (">>", False)]
)
def test_classify_redirect(token, clobber):
    cmd = classify(["echo", "x", token, "out.txt", "extra"])
    assert cmd.kind is CommandKind.REDIRECT
    assert cmd.argv == ["echo", "x"]
    assert cmd.filename == "out.txt"
    assert cmd.clobber is clobber


def test_clobber_sticks_after_later_append():
    cmd = classify(["echo", ">", "a", ">>", "b"])
    assert cmd.argv == ["echo", ">", "a"]
    assert cmd.filename == "b"
    assert cmd.clobber is True


def test_redirect_without_filename():
    cmd = classify(["echo", ">>"])
    assert cmd.kind is CommandKind.REDIRECT
    assert cmd.filename is None