"""Unit tests for adapters."""

import io
import json

import pytest
import qrcode
import requests
from PIL import Image
from unittest.mock import AsyncMock, Mock, patch
from qrsecure.adapters import (
    ConsoleAdapter,
    GeminiSummarizerAdapter,
    HTTPSummarizerAdapter,
    InMemoryHistoryAdapter,
    JsonFileHistoryAdapter,
    QRCodeAdapter,
    StdoutAdapter,
    TelegramNotifierAdapter,
)
from qrsecure.adapters.gemini_summarizer_adapter import strip_fences
from qrsecure.errors import HistoryPersistenceError
from qrsecure.history import HistoryEntry
from qrsecure.interfaces import SummaryResult


def _entry(n: int) -> HistoryEntry:
    stamp = f"2024-04-05T10:00:{n:02d}.000Z"
    return HistoryEntry(
        id=stamp,
        timestamp=stamp,
        qr_code_url=f"data:image/png;base64,{n}",
        form_data={"formType": "contactForm", "fullName": f"User {n}"},
    )


def test_qr_code_adapter_generates_png():
    """QR adapter returns a 300x300 PNG."""
    adapter = QRCodeAdapter()
    result = adapter.generate("https://qr.example.com/view?data=dGVzdA==")

    assert result[:8] == b'\x89PNG\r\n\x1a\n'
    img = Image.open(io.BytesIO(result))
    assert img.size == (300, 300)


def test_qr_code_adapter_uses_fixed_colors():
    """Quiet zone is painted with the light color."""
    adapter = QRCodeAdapter()
    img = Image.open(io.BytesIO(adapter.generate("short"))).convert("RGB")

    assert img.getpixel((0, 0)) == (240, 248, 255)


def test_qr_code_adapter_different_inputs():
    """QR adapter handles different inputs."""
    adapter = QRCodeAdapter()

    qr1 = adapter.generate("short")
    qr2 = adapter.generate("long data" * 100)

    assert len(qr1) > 0
    assert len(qr2) > 0
    assert qr1 != qr2


def test_qr_code_adapter_capacity_overflow():
    """Data beyond the largest symbol raises."""
    adapter = QRCodeAdapter(error_correction="H")

    with pytest.raises(qrcode.exceptions.DataOverflowError):
        adapter.generate("x" * 5000)


def test_qr_code_adapter_rejects_unknown_level():
    """Only L, M, Q and H are accepted."""
    with pytest.raises(ValueError):
        QRCodeAdapter(error_correction="Z")


@patch('qrsecure.adapters.http_summarizer_adapter.requests.post')
def test_http_summarizer_success(mock_post):
    """Summary is pulled out of the success envelope."""
    mock_post.return_value = Mock(
        status_code=200,
        json=lambda: {"success": True, "data": {"summary": "short"}}
    )

    adapter = HTTPSummarizerAdapter("http://test/summarize")
    result = adapter.summarize("long text")

    assert result.success is True
    assert result.summary == "short"
    mock_post.assert_called_once()
    assert mock_post.call_args.kwargs["json"] == {"text": "long text"}


@patch('qrsecure.adapters.http_summarizer_adapter.requests.post')
def test_http_summarizer_failure_envelope(mock_post):
    """Service-reported errors are passed through."""
    mock_post.return_value = Mock(
        status_code=200,
        json=lambda: {"success": False, "error": "model overloaded"}
    )

    result = HTTPSummarizerAdapter("http://test/summarize").summarize("x")

    assert result.success is False
    assert result.error == "model overloaded"


@patch('qrsecure.adapters.http_summarizer_adapter.requests.post')
def test_http_summarizer_http_error(mock_post):
    """Non-200 responses are failures."""
    mock_post.return_value = Mock(status_code=502)

    result = HTTPSummarizerAdapter("http://test/summarize").summarize("x")

    assert result.success is False
    assert "502" in result.error


@patch('qrsecure.adapters.http_summarizer_adapter.requests.post')
def test_http_summarizer_connection_error(mock_post):
    """Transport errors are failures, not exceptions."""
    mock_post.side_effect = requests.ConnectionError("service down")

    result = HTTPSummarizerAdapter("http://test/summarize").summarize("x")

    assert result.success is False
    assert "service down" in result.error


def test_strip_fences():
    """Markdown fences around model output are removed."""
    assert strip_fences("```text\nName: Jane\n```") == "Name: Jane"
    assert strip_fences("  Name: Jane  ") == "Name: Jane"


def test_memory_history_caps_at_capacity():
    """51 appends keep 50, newest first, oldest evicted."""
    history = InMemoryHistoryAdapter()
    for n in range(51):
        history.append(_entry(n))

    entries = history.list()

    assert len(entries) == 50
    assert entries[0].id == _entry(50).id
    assert entries[-1].id == _entry(1).id
    assert _entry(0).id not in [e.id for e in entries]


def test_memory_history_clear():
    """Clear empties the store."""
    history = InMemoryHistoryAdapter()
    history.append(_entry(1))

    history.clear()

    assert history.list() == []


def test_json_history_caps_and_persists(tmp_path):
    """File store survives reopening and keeps the 50 newest."""
    path = tmp_path / "history.json"
    history = JsonFileHistoryAdapter(str(path))
    for n in range(51):
        history.append(_entry(n))

    reopened = JsonFileHistoryAdapter(str(path))
    entries = reopened.list()

    assert len(entries) == 50
    assert entries[0] == _entry(50)
    assert entries[-1] == _entry(1)

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert len(stored["qrCodeHistory"]) == 50
    assert stored["qrCodeHistory"][0]["qrCodeUrl"] == _entry(50).qr_code_url


def test_json_history_keeps_other_keys(tmp_path):
    """Only the history key is touched."""
    path = tmp_path / "history.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
    history = JsonFileHistoryAdapter(str(path))

    history.append(_entry(1))
    history.clear()

    assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}


def test_json_history_missing_file_is_empty(tmp_path):
    """No file yet means no history."""
    history = JsonFileHistoryAdapter(str(tmp_path / "none.json"))

    assert history.list() == []
    assert history.capacity == 50


def test_json_history_corrupt_file_raises(tmp_path):
    """Corrupt storage is reported, not silently reset."""
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")
    history = JsonFileHistoryAdapter(str(path))

    with pytest.raises(HistoryPersistenceError):
        history.append(_entry(1))
    assert path.read_text(encoding="utf-8") == "{not json"


def test_stdout_adapter_filters_levels(capsys):
    """Entries below the minimum level are dropped."""
    logger = StdoutAdapter(min_level="warn")

    logger.log("info", "hidden")
    logger.log("error", "shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "ERROR: shown" in out


@patch('qrsecure.adapters.gemini_summarizer_adapter.genai')
def test_gemini_summarizer_success(mock_genai):
    """Gemini output is unfenced and returned as the summary."""
    models = mock_genai.Client.return_value.models
    models.generate_content.return_value = Mock(text="```\nName: Jane\n```")

    adapter = GeminiSummarizerAdapter("key", "gemini-test", limit=500)
    result = adapter.summarize("Name: Jane\n" * 300)

    assert result == SummaryResult(success=True, summary="Name: Jane")
    mock_genai.Client.assert_called_once_with(api_key="key")
    kwargs = models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-test"
    prompt = kwargs["contents"]
    assert "500 characters" in prompt


@patch('qrsecure.adapters.gemini_summarizer_adapter.genai')
def test_gemini_summarizer_error(mock_genai):
    """Model exceptions become failure results."""
    models = mock_genai.Client.return_value.models
    models.generate_content.side_effect = RuntimeError("quota")

    result = GeminiSummarizerAdapter("key", "m").summarize("x")

    assert result.success is False
    assert "quota" in result.error


@pytest.mark.asyncio
@patch('qrsecure.adapters.telegram_notifier_adapter.Bot')
async def test_telegram_notifier_sends_messages(mock_bot_cls):
    """Telegram adapter posts notifications and the QR image."""
    bot = mock_bot_cls.return_value
    bot.send_message = AsyncMock()
    bot.send_photo = AsyncMock()
    bot.send_document = AsyncMock()

    adapter = TelegramNotifierAdapter("token", 12345)
    await adapter.notify("error", "Error", "Failed to generate QR code.")
    await adapter.send_qr(b"png", "contactForm-QRCodeSecure.png")

    text = bot.send_message.call_args.kwargs["text"]
    assert "Failed to generate QR code." in text
    assert bot.send_message.call_args.kwargs["chat_id"] == 12345
    bot.send_photo.assert_called_once()
    assert bot.send_document.call_args.kwargs["filename"] == (
        "contactForm-QRCodeSecure.png"
    )


@pytest.mark.asyncio
async def test_console_adapter_writes_png(tmp_path, capsys):
    """Console adapter saves the QR into the output directory."""
    adapter = ConsoleAdapter(output_dir=str(tmp_path / "out"))

    await adapter.send_qr(b"png", "studentBio-QRCodeSecure.png")

    saved = tmp_path / "out" / "studentBio-QRCodeSecure.png"
    assert saved.read_bytes() == b"png"
    assert adapter.saved_paths == [str(saved)]


@pytest.mark.asyncio
async def test_console_adapter_confirm(monkeypatch, capsys):
    """Summary is accepted only on an explicit yes."""
    adapter = ConsoleAdapter()

    monkeypatch.setattr("builtins.input", lambda prompt: "y")
    assert await adapter.confirm_summary("short") is True

    monkeypatch.setattr("builtins.input", lambda prompt: "")
    assert await adapter.confirm_summary("short") is False

    assert "short" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_console_adapter_accept_summary(monkeypatch, capsys):
    """--accept-summary skips the prompt but still shows the summary."""
    monkeypatch.setattr("builtins.input", Mock(side_effect=AssertionError))

    adapter = ConsoleAdapter(accept_summary=True)
    assert await adapter.confirm_summary("Name: Jane") is True

    out = capsys.readouterr().out
    assert "Name: Jane" in out
    assert "pre-approved" in out


@pytest.mark.asyncio
async def test_console_adapter_closed_stdin_rejects(monkeypatch, capsys):
    """No answer on stdin counts as a rejection."""
    monkeypatch.setattr("builtins.input", Mock(side_effect=EOFError))

    assert await ConsoleAdapter().confirm_summary("s") is False
    assert "ERROR: no answer on stdin" in capsys.readouterr().err
