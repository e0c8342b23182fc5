from blockfall.toast import FPS_TARGET, MAX_MESSAGE_LEN, Toast


def test_new_toast_is_hidden():
    toast = Toast()
    assert toast.visible is False
    assert toast.text == ""


def test_message_shows_text():
    toast = Toast()
    toast.message("Hello World!", FPS_TARGET * 5)
    assert toast.visible is True
    assert toast.text == "Hello World!"
    assert toast.duration == FPS_TARGET * 5


def test_message_at_limit_is_replaced():
    toast = Toast()
    toast.message("x" * MAX_MESSAGE_LEN, 10)
    assert toast.text == "ERROR_MAX_LEN"
    assert toast.visible is True


def test_message_just_under_limit_is_kept():
    toast = Toast()
    text = "y" * (MAX_MESSAGE_LEN - 1)
    toast.message(text, 10)
    assert toast.text == text


def test_update_counts_down_then_hides():
    toast = Toast()
    toast.message("Paused", 3)
    for _ in range(3):
        toast.update()
        assert toast.visible is True
    assert toast.duration == 0
    toast.update()
    assert toast.visible is False


def test_alpha_full_while_long_duration():
    toast = Toast()
    toast.message("Restart", FPS_TARGET * 3)
    assert toast.alpha() == 255
    toast.duration = FPS_TARGET
    assert toast.alpha() == 255


def test_alpha_fades_monotonically():
    toast = Toast()
    toast.message("Restart", FPS_TARGET)
    values = []
    for _ in range(FPS_TARGET + 1):
        values.append(toast.alpha())
        toast.update()
    assert values == sorted(values, reverse=True)
    assert values[0] == 255
    assert values[-1] == 0
    assert all(0 <= v <= 255 for v in values)