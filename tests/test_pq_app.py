from practicum.pq_app import PriorityQueueApp, main


def test_help_without_arguments():
    out = PriorityQueueApp()(["prog"])
    assert out.startswith(
        "\tThis is an application for working with a priority queue.\n\n\n"
    )
    assert "   $ prog  <Operation>  <value_or_values>\n\n" in out
    assert out.endswith("\n\t'clear' - \tClears the queue\n\n")


def test_put_and_top():
    out = PriorityQueueApp()(["prog", "put", "3", "1", "2", "top"])
    assert out == (
        "\tAn insertion was made from the queue:\n\t 3 1 2\n"
        "\tAt the top of the queue a value of 3\n"
    )


def test_unknown_operation():
    assert PriorityQueueApp()(["prog", "push", "1"]) == (
        "Unknown operator. Incorrect input format"
    )


def test_pop_on_empty_queue():
    assert PriorityQueueApp()(["prog", "pop"]) == "Cant pop() because queue is empty"


def test_top_on_empty_queue():
    assert PriorityQueueApp()(["prog", "top"]) == "Cant top() because queue is empty"


def test_get_on_empty_queue():
    assert PriorityQueueApp()(["prog", "get"]) == "Cant get() because queue is empty"


def test_bad_number_format():
    assert PriorityQueueApp()(["prog", "put", "x1"]) == "Wrong number format!"


def test_number_out_of_range():
    assert PriorityQueueApp()(["prog", "put", "99999999999"]) == (
        "Wrong number format!"
    )


def test_empty_report():
    assert PriorityQueueApp()(["prog", "empty"]) == "\tQueue is empty\n"


def test_not_empty_after_put():
    out = PriorityQueueApp()(["prog", "put", "4", "empty"])
    assert out.endswith("\tQueue is not empty\n")


def test_clear_then_empty():
    out = PriorityQueueApp()(["prog", "put", "4", "clear", "empty"])
    assert out.endswith("\tThe queue cleared\n\tQueue is empty\n")


def test_size_report():
    out = PriorityQueueApp()(["prog", "put", "8", "9", "size"])
    assert out.endswith("\tA queue size = 2\n")


def test_state_persists_between_calls():
    app = PriorityQueueApp()
    first = app(["prog", "put", "5", "7"])
    second = app(["prog", "get"])
    assert second.startswith(first)
    assert second.endswith("\tThe withdrawal was made from the queue a value of 7\n")


def test_main_prints_output(capsys):
    assert main(["prog", "empty"]) == 0
    assert capsys.readouterr().out == "\tQueue is empty\n"