"""API endpoint tests."""

from collections.abc import AsyncIterator

import pytest
from litestar.status_codes import (
    HTTP_200_OK,
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from litestar.testing import AsyncTestClient

from foot_pressure_server.app import HISTORY_ERROR_BODY, create_app
from foot_pressure_server.services.generator import SampleGenerator


@pytest.fixture
async def client() -> AsyncIterator[AsyncTestClient]:
    """Create test client."""
    async with AsyncTestClient(app=create_app()) as client:
        yield client


async def test_health_check(client: AsyncTestClient) -> None:
    """Test health check endpoint."""
    response = await client.get("/health")

    assert response.status_code == HTTP_200_OK
    data = response.json()
    assert data["status"] == "ok"
    assert "version" in data
    assert data["waveforms"]["heel"] > 0
    assert data["waveforms"]["ankle"] > 0


class TestHistoryEndpoint:
    """Tests for GET /api/v1/history."""

    async def test_default_query(self, client: AsyncTestClient) -> None:
        """Test defaults: 3d period, 5m interval, raw series."""
        response = await client.get("/api/v1/history")

        assert response.status_code == HTTP_200_OK
        data = response.json()
        assert set(data) == {"data", "stats", "meta", "highSpans"}
        assert data["meta"]["period"] == "3d"
        assert data["meta"]["interval"] == "5m"
        assert data["stats"]["sampleCount"] == 864
        assert len(data["data"]) == 864

    async def test_response_shape(self, client: AsyncTestClient) -> None:
        """Test samples and stats use the wire field names."""
        response = await client.get("/api/v1/history", params={"period": "30d"})

        data = response.json()
        sample = data["data"][0]
        assert set(sample) == {"ts", "heel", "leftAnkle", "rightAnkle"}
        assert sample["ts"].endswith("Z")
        stats = data["stats"]
        assert stats["period"] == "30d"
        assert stats["sampleCount"] == 720
        for key in ("avg", "max", "timeInHighPct"):
            assert set(stats[key]) == {"heel", "leftAnkle", "rightAnkle"}
        for event in stats["highEvents"]:
            assert set(event) == {"region", "start", "end", "peak", "samples"}

    async def test_standing_lying_rule(self, client: AsyncTestClient) -> None:
        """Test no returned sample has a loaded heel and loaded ankles."""
        response = await client.get(
            "/api/v1/history", params={"period": "7d", "interval": "5m"}
        )

        for sample in response.json()["data"]:
            if sample["heel"] > 0:
                assert sample["leftAnkle"] == 0
                assert sample["rightAnkle"] == 0

    async def test_smoothing_and_points(self, client: AsyncTestClient) -> None:
        """Test chart shaping parameters reduce the series but not the stats."""
        params = {"period": "7d", "patientId": "demo"}
        raw = (await client.get("/api/v1/history", params=params)).json()
        shaped = (
            await client.get("/api/v1/history", params={**params, "smoothing": 5, "points": 250})
        ).json()

        assert len(shaped["data"]) == 250
        assert shaped["meta"]["smoothing"] == 5
        assert shaped["meta"]["targetPoints"] == 250
        assert shaped["stats"]["sampleCount"] == raw["stats"]["sampleCount"] == 2016
        # Each request anchors its own window at the current time; compare clock-free fields
        def event_shape(events):
            return [(e["region"], e["peak"], e["samples"]) for e in events]

        assert event_shape(shaped["stats"]["highEvents"]) == event_shape(
            raw["stats"]["highEvents"]
        )

    async def test_empty_interval_uses_default(self, client: AsyncTestClient) -> None:
        """Test an empty interval parameter falls back to the period default."""
        response = await client.get("/api/v1/history?period=7d&interval=")

        assert response.status_code == HTTP_200_OK
        assert response.json()["meta"]["interval"] == "5m"

    async def test_long_series_capped_without_points(self, client: AsyncTestClient) -> None:
        """Test a minute-resolution month is downsampled for the chart."""
        response = await client.get("/api/v1/history", params={"period": "30d", "interval": "1m"})

        data = response.json()
        assert len(data["data"]) == 1500
        assert data["meta"]["targetPoints"] == 1500
        assert data["stats"]["sampleCount"] == 43200

    @pytest.mark.parametrize(
        "params",
        [
            {"period": "1d"},
            {"period": "3d", "interval": "10m"},
            {"patientId": "bad id!"},
            {"smoothing": -1},
            {"points": 2},
        ],
    )
    async def test_invalid_parameters(self, client: AsyncTestClient, params: dict) -> None:
        """Test invalid query parameters are rejected with 400."""
        response = await client.get("/api/v1/history", params=params)

        assert response.status_code == HTTP_400_BAD_REQUEST

    async def test_pipeline_failure_generic_500(
        self, client: AsyncTestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test internal failures return a generic error body without details."""

        def broken(self, *args, **kwargs):
            raise RuntimeError("waveform store unavailable")

        monkeypatch.setattr(SampleGenerator, "generate", broken)

        response = await client.get("/api/v1/history")

        assert response.status_code == HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == HISTORY_ERROR_BODY
        assert "waveform" not in response.text


class TestExportEndpoint:
    """Tests for GET /api/v1/history/export.csv."""

    async def test_csv_export(self, client: AsyncTestClient) -> None:
        """Test CSV export returns a header and one row per sample."""
        response = await client.get(
            "/api/v1/history/export.csv", params={"period": "3d", "interval": "1h"}
        )

        assert response.status_code == HTTP_200_OK
        assert response.headers["content-type"].startswith("text/csv")
        assert "pressure-history-3d.csv" in response.headers["content-disposition"]

        lines = response.text.strip().split("\n")
        assert lines[0] == "timestamp,heel,leftAnkle,rightAnkle"
        assert len(lines) == 73
        first = lines[1].split(",")
        assert first[0].endswith("Z")
        assert len(first) == 4

    async def test_smoothed_export_filename(self, client: AsyncTestClient) -> None:
        """Test the filename records the smoothing window."""
        response = await client.get(
            "/api/v1/history/export.csv", params={"period": "7d", "smoothing": 10}
        )

        assert response.status_code == HTTP_200_OK
        assert "pressure-history-7d-smoothed-10.csv" in response.headers["content-disposition"]
        assert len(response.text.strip().split("\n")) == 2017

    async def test_identity_smoothing_not_in_filename(self, client: AsyncTestClient) -> None:
        """Test a window of 1 leaves the data raw and the filename unsuffixed."""
        response = await client.get(
            "/api/v1/history/export.csv", params={"period": "3d", "smoothing": 1}
        )

        assert response.status_code == HTTP_200_OK
        disposition = response.headers["content-disposition"]
        assert "pressure-history-3d.csv" in disposition
        assert "smoothed" not in disposition

    async def test_export_rejects_invalid_period(self, client: AsyncTestClient) -> None:
        """Test export validates parameters like the history endpoint."""
        response = await client.get("/api/v1/history/export.csv", params={"period": "90d"})

        assert response.status_code == HTTP_400_BAD_REQUEST
