from endless_runner.utils.share import ShareOutcome, ShareService, compose_message

URL = "https://example.com/run"


def test_compose_message():
    message = compose_message(42, "Endless Runner", URL)
    assert message.text == f"I scored 42 in Endless Runner! Can you beat my score?\n\n{URL}"
    assert message.copy_text == f"My score: 42\nEndless Runner - {URL}"
    assert message.title == "Endless Runner"


def test_native_share_accepted():
    shared = []

    def native(message):
        shared.append(message.score)
        return True

    result = ShareService("Endless Runner", URL, native=native).share(7)
    assert result.outcome == ShareOutcome.SHARED
    assert shared == [7]


def test_native_share_declined_does_not_fall_back():
    copied = []
    service = ShareService("Endless Runner", URL, native=lambda m: False, copier=copied.append)
    assert service.share(7).outcome == ShareOutcome.CANCELLED
    assert copied == []


def test_native_failure_falls_back_to_clipboard():
    copied = []

    def native(message):
        raise OSError("no share sheet")

    result = ShareService("Endless Runner", URL, native=native, copier=copied.append).share(3)
    assert result.outcome == ShareOutcome.COPIED
    assert copied == [f"My score: 3\nEndless Runner - {URL}"]
    assert "clipboard" in result.notice


def test_everything_unavailable_displays_link():
    def copier(text):
        raise RuntimeError("clipboard locked")

    result = ShareService("Endless Runner", URL, copier=copier).share(3)
    assert result.outcome == ShareOutcome.DISPLAYED
    assert result.notice == f"Share this: {URL}"


def test_no_mechanisms_displays_link():
    result = ShareService("Endless Runner", URL).share(0)
    assert result.outcome == ShareOutcome.DISPLAYED
