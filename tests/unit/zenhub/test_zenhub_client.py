"""Unit tests for ZenHubClient and board models."""

from unittest.mock import MagicMock

import httpx
import pytest

from zenhub_export.zenhub import (
    Board,
    BoardNotFoundError,
    Pipeline,
    PipelineReference,
    ZenHubAuthError,
    ZenHubClient,
    ZenHubError,
    ZenHubRateLimitError,
)

BOARD_PAYLOAD = {
    "pipelines": [
        {
            "id": "p1",
            "name": "Team/Backlog",
            "issues": [
                {"issue_number": 3, "position": 0, "is_epic": False, "estimate": {"value": 5}},
                {"issue_number": 1, "position": 1, "is_epic": True},
            ],
        },
        {"id": "p2", "name": "Waiting", "issues": []},
    ]
}


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock HTTP client."""
    return MagicMock()


@pytest.fixture
def client(mock_client: MagicMock) -> ZenHubClient:
    """Create a ZenHubClient instance with mocked HTTP client."""
    zenhub = ZenHubClient(token="test-token")
    zenhub._client = mock_client
    return zenhub


def _mock_response(
    status_code: int = 200,
    json_data: object = None,
    headers: dict[str, str] | None = None,
    text: str = "",
) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.headers = headers or {}
    response.text = text
    return response


@pytest.mark.unit
class TestBoardModels:
    """Tests for parsing board payloads."""

    def test_estimate_extracted_from_nested_value(self) -> None:
        ref = PipelineReference.from_zenhub(
            {"issue_number": 3, "position": 2, "is_epic": False, "estimate": {"value": 5}}
        )
        assert ref == PipelineReference(issue_number=3, is_epic=False, position=2, estimate=5)

    def test_missing_estimate_is_none(self) -> None:
        ref = PipelineReference.from_zenhub({"issue_number": 3, "position": 0, "is_epic": True})
        assert ref.estimate is None
        assert ref.is_epic is True

    def test_estimate_without_value_is_none(self) -> None:
        ref = PipelineReference.from_zenhub({"issue_number": 3, "estimate": {}})
        assert ref.estimate is None

    def test_missing_flags_default(self) -> None:
        ref = PipelineReference.from_zenhub({"issue_number": 3})
        assert ref.is_epic is False
        assert ref.position == 0

    def test_board_preserves_order(self) -> None:
        """Pipelines and references keep board display order."""
        board = Board.from_zenhub(BOARD_PAYLOAD)

        assert [p.name for p in board.pipelines] == ["Team/Backlog", "Waiting"]
        assert [r.issue_number for r in board.pipelines[0].references] == [3, 1]
        assert board.pipelines[1].references == []

    def test_pipeline_without_issues_key(self) -> None:
        pipeline = Pipeline.from_zenhub({"name": "Done"})
        assert pipeline.references == []


@pytest.mark.unit
class TestFetchBoard:
    """Tests for fetch_board."""

    def test_returns_board(self, client: ZenHubClient, mock_client: MagicMock) -> None:
        """Board parsed from response."""
        mock_client.get.return_value = _mock_response(json_data=BOARD_PAYLOAD)

        board = client.fetch_board(4242)

        assert isinstance(board, Board)
        assert len(board.pipelines) == 2
        mock_client.get.assert_called_once_with("/p1/repositories/4242/board")

    def test_not_found(self, client: ZenHubClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(status_code=404)

        with pytest.raises(BoardNotFoundError):
            client.fetch_board(4242)

    def test_unauthorized(self, client: ZenHubClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(status_code=401, text="Invalid token")

        with pytest.raises(ZenHubAuthError):
            client.fetch_board(4242)

    def test_rate_limited(self, client: ZenHubClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(status_code=429)

        with pytest.raises(ZenHubRateLimitError):
            client.fetch_board(4242)

    def test_server_error(self, client: ZenHubClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(status_code=500, text="oops")

        with pytest.raises(ZenHubError) as exc_info:
            client.fetch_board(4242)

        assert "500" in str(exc_info.value)

    def test_transport_error_wrapped(self, client: ZenHubClient, mock_client: MagicMock) -> None:
        mock_client.get.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(ZenHubError):
            client.fetch_board(4242)

    def test_non_json_body(self, client: ZenHubClient, mock_client: MagicMock) -> None:
        """A 200 with an HTML body raises ZenHubError instead of a decode error."""
        response = _mock_response(text="<html>maintenance</html>")
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        mock_client.get.return_value = response

        with pytest.raises(ZenHubError) as exc_info:
            client.fetch_board(4242)

        assert "4242" in str(exc_info.value)

    def test_pipeline_without_name(self, client: ZenHubClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(json_data={"pipelines": [{"issues": []}]})

        with pytest.raises(ZenHubError) as exc_info:
            client.fetch_board(4242)

        assert "Malformed board payload" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_reference_without_issue_number(
        self, client: ZenHubClient, mock_client: MagicMock
    ) -> None:
        mock_client.get.return_value = _mock_response(
            json_data={"pipelines": [{"name": "Waiting", "issues": [{"position": 0}]}]}
        )

        with pytest.raises(ZenHubError):
            client.fetch_board(4242)


@pytest.mark.unit
def test_client_sends_authentication_header() -> None:
    """Token sent in X-Authentication-Token header."""
    zenhub = ZenHubClient(token="zh-secret")

    assert zenhub.client.headers["X-Authentication-Token"] == "zh-secret"
    zenhub.close()
    assert zenhub._client is None
