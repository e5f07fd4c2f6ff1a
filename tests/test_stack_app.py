from practicum.stack_app import StackApp, main


def test_help_without_arguments():
    out = StackApp()(["app"])
    assert out.startswith("This is an integer stack application.\n\n")
    assert "push <values> \t Input element(s) and push it into stack.\n" in out
    assert out.endswith("c \t\t Clear stack.\n\n\n")


def test_empty_on_new_stack():
    assert StackApp()(["app", "e"]) == "true\n"


def test_push_then_top():
    assert StackApp()(["app", "push", "5", "t"]) == " 5\n"


def test_push_several_then_size():
    assert StackApp()(["app", "push", "1", "2", "s"]) == " 2\n"


def test_push_negative_value():
    assert StackApp()(["app", "push", "-3", "t"]) == " -3\n"


def test_push_takes_leading_digits():
    assert StackApp()(["app", "push", "12abc", "t"]) == " 12\n"


def test_push_then_not_empty():
    assert StackApp()(["app", "push", "8", "e"]) == " false\n"


def test_top_of_empty_stack():
    assert StackApp()(["app", "t"]) == "error: can't get top, stack is empty\n"


def test_pop_of_empty_stack():
    assert StackApp()(["app", "pop"]) == "error: can't pop, stack is empty\n"


def test_unknown_key():
    assert StackApp()(["app", "x"]) == "error: unknown key x\n"


def test_pop_reveals_previous_value():
    out = StackApp()(["app", "push", "4", "9", "pop", "t"])
    assert out.endswith("4\n")
    assert "9" not in out.replace("push", "")


def test_clear_then_empty():
    out = StackApp()(["app", "push", "1", "c", "e"])
    assert out.strip() == "true"


def test_state_and_message_persist_between_calls():
    app = StackApp()
    first = app(["app", "push", "4"])
    second = app(["app", "t"])
    assert second.startswith(first)
    assert second == first + "4\n"


def test_main_writes_output(capsys):
    assert main(["app", "e"]) == 0
    assert capsys.readouterr().out == "true\n"