from email.message import EmailMessage
from pathlib import Path

import pytest
from click.testing import CliRunner

from tripdoc.main import cli


@pytest.fixture(autouse=True)
def _offline(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VISION_PROVIDER", "example")
    monkeypatch.setattr("tripdoc.main.Log.configure", lambda log_level: None)


def _write_email(path: Path, body: str) -> Path:
    msg = EmailMessage()
    msg["Subject"] = "Your booking"
    msg["From"] = "bookings@example.com"
    msg.set_content(body)
    path.write_bytes(msg.as_bytes())
    return path


class TestExtractCommand:
    def test_prints_sanitized_email_body(self, tmp_path: Path) -> None:
        path = _write_email(
            tmp_path / "confirmation.eml",
            "Contact me at jane@example.com or call 415-555-1234.",
        )

        result = CliRunner().invoke(cli, ["extract", str(path)])

        assert result.exit_code == 0
        assert result.stdout == "Contact me at [EMAIL REMOVED] or call [PHONE NUMBER REMOVED].\n"
        assert "bookings@example.com" not in result.stdout

    def test_media_type_option_overrides_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "upload.bin"
        path.write_bytes(b"Gate closes 20 minutes before departure.")

        result = CliRunner().invoke(cli, ["extract", str(path), "--media-type", "text/plain"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Gate closes 20 minutes before departure."

    def test_image_uses_configured_oracle(self, tmp_path: Path) -> None:
        path = tmp_path / "pass.png"
        path.write_bytes(b"\x89PNG\r\n\x1a\n")

        result = CliRunner().invoke(cli, ["extract", str(path)])

        assert result.exit_code == 0
        assert "BOARDING PASS" in result.stdout

    def test_unsupported_type_exits_with_kind(self, tmp_path: Path) -> None:
        path = tmp_path / "archive.xyz123"
        path.write_bytes(b"data")

        result = CliRunner().invoke(cli, ["extract", str(path)])

        assert result.exit_code == 1
        assert "Could not process document (unsupported_media_type)" in result.stderr
        assert result.stdout == ""

    def test_broken_pdf_exits_with_pdf_kind(self, tmp_path: Path) -> None:
        path = tmp_path / "ticket.pdf"
        path.write_bytes(b"not a pdf")

        result = CliRunner().invoke(cli, ["extract", str(path)])

        assert result.exit_code == 1
        assert "Could not process document (pdf)" in result.stderr

    def test_missing_file_is_a_usage_error(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli, ["extract", str(tmp_path / "missing.pdf")])
        assert result.exit_code == 2
