from termreq.buffer import InputBuffer


def test_new_buffer_is_empty():
    buffer = InputBuffer()
    assert buffer.value == ""
    assert buffer.value_backup is None
    assert buffer.command(object()) is None


def test_reset_without_backup_clears_value():
    buffer = InputBuffer(value="typed")
    buffer.reset_to_backup()
    assert buffer.value == ""


def test_reset_restores_backup():
    buffer = InputBuffer()
    buffer.set_backup("original")
    buffer.value = "changed"
    buffer.reset_to_backup()
    assert buffer.value == "original"
    assert buffer.value_backup == "original"


def test_command_is_kept():
    calls = []
    buffer = InputBuffer(command=calls.append)
    buffer.command("app")
    assert calls == ["app"]