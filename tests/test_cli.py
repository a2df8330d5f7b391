"""Tests for the command-line interface."""

import json

import httpx
import pytest
from click.testing import CliRunner

from ayah_cards.cli import main
from ayah_cards.quran.client import QuranClient

from conftest import BASE_URL, editions_payload


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake_api(monkeypatch):
    """Point the CLI at a fake API answering with ``payload``."""

    def install(payload, status_code: int = 200) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=payload)

        monkeypatch.setattr(
            "ayah_cards.quran.client.get_quran_client",
            lambda: QuranClient(base_url=BASE_URL, transport=httpx.MockTransport(handler)),
        )

    return install


class TestInfoCommands:
    """Test commands that need no network."""

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_languages(self, runner):
        result = runner.invoke(main, ["languages"])
        assert result.exit_code == 0
        assert "fr.hamidullah" in result.output

    def test_surahs(self, runner):
        result = runner.invoke(main, ["surahs"])
        assert result.exit_code == 0
        assert "Al-Fatihah" in result.output
        assert "286" in result.output

    def test_theme(self, runner):
        result = runner.invoke(main, ["theme", "the stars of the night sky"])
        assert result.exit_code == 0
        assert "Theme: SKY" in result.output

    def test_theme_fallback_note(self, runner):
        result = runner.invoke(main, ["theme", "", "--seed", "1"])
        assert result.exit_code == 0
        assert "no keywords matched" in result.output


class TestCardsCommand:
    """Test the cards command against a fake API."""

    def test_cards_with_output(self, runner, fake_api, tmp_path):
        fake_api(editions_payload(["ب" * 300, "ب" * 300], ["the earth", "the sea"]))
        out = tmp_path / "cards.json"

        result = runner.invoke(main, ["cards", "1", "1", "--end", "2", "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert "Theme: NATURE" in result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert [c["verse"]["ayah"] for c in data["cards"]] == ["1", "2"]

    def test_api_error_exits_nonzero(self, runner, fake_api):
        fake_api({"code": 503}, status_code=503)

        result = runner.invoke(main, ["cards", "1", "1"])

        assert result.exit_code == 1
        assert "503" in result.output

    def test_start_beyond_surah(self, runner, fake_api):
        fake_api(editions_payload(["ب"], ["x"]))

        result = runner.invoke(main, ["cards", "1", "9"])

        assert result.exit_code == 2

    def test_surah_out_of_range(self, runner):
        result = runner.invoke(main, ["cards", "115", "1"])
        assert result.exit_code == 2

    def test_unknown_language_rejected(self, runner):
        result = runner.invoke(main, ["cards", "1", "1", "--language", "Klingon"])
        assert result.exit_code == 2


class TestVisitsCommand:
    """Test the visit counter command."""

    def test_counter_value(self, runner, monkeypatch):
        monkeypatch.setattr("ayah_cards.counter.hit_counter", lambda: 1234)

        result = runner.invoke(main, ["visits"])

        assert result.exit_code == 0
        assert "1,234" in result.output

    def test_counter_unavailable(self, runner, monkeypatch):
        monkeypatch.setattr("ayah_cards.counter.hit_counter", lambda: None)

        result = runner.invoke(main, ["visits"])

        assert result.exit_code == 0
        assert "unavailable" in result.output


class TestPreviewCommand:
    """Test the surah preview command."""

    def test_preview_limit(self, runner, fake_api):
        fake_api(
            {
                "code": 200,
                "data": {
                    "englishName": "Al-Faatiha",
                    "ayahs": [{"numberInSurah": n, "text": f"آية{n}"} for n in range(1, 8)],
                },
            }
        )

        result = runner.invoke(main, ["preview", "1", "--limit", "3"])

        assert result.exit_code == 0, result.output
        assert "Al-Fatihah" in result.output
        assert "4 more" in result.output


class TestSaveOption:
    """Test exporting into the configured output directory."""

    def test_save_uses_output_dir_setting(self, runner, fake_api, monkeypatch, tmp_path):
        out_dir = tmp_path / "exports"
        monkeypatch.setenv("AYC_OUTPUT_DIR", str(out_dir))
        fake_api(editions_payload(["ب" * 10, "ب" * 10], ["the earth", "the sea"]))

        result = runner.invoke(main, ["cards", "1", "1", "--end", "2", "--save"])

        assert result.exit_code == 0, result.output
        saved = out_dir / "surah_001_1-2.json"
        assert saved.exists()
        data = json.loads(saved.read_text(encoding="utf-8"))
        assert data["cards"][0]["verse"]["ayah"] == "1-2"

    def test_output_wins_over_save(self, runner, fake_api, monkeypatch, tmp_path):
        monkeypatch.setenv("AYC_OUTPUT_DIR", str(tmp_path / "unused"))
        fake_api(editions_payload(["ب"], ["x"]))
        out = tmp_path / "explicit.json"

        result = runner.invoke(main, ["cards", "1", "1", "--save", "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert out.exists()
        assert not (tmp_path / "unused").exists()
