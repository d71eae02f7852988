"""Tests for the waitable indexing responses."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from algolia_client.helpers.responses import (
    BatchIndexingResponse,
    MultipleIndexBatchIndexingResponse,
    NullResponse,
)
from algolia_client.models import BatchResponse, MultipleBatchResponse


@pytest.fixture
def mock_index():
    index = MagicMock()
    index.wait_task = AsyncMock()
    return index


class TestBatchIndexingResponse:
    """Tests for the aggregate of split batches."""

    def test_responses_are_models(self, mock_index):
        response = BatchIndexingResponse(
            [{"taskID": 1, "objectIDs": ["a"]}, {"taskID": 2, "objectIDs": ["b", "c"]}],
            mock_index,
        )

        assert all(isinstance(item, BatchResponse) for item in response.responses)
        assert response.task_ids == [1, 2]
        assert response.object_ids == ["a", "b", "c"]
        assert list(response)[0] == {"taskID": 1, "objectIDs": ["a"]}

    def test_missing_task_id(self, mock_index):
        response = BatchIndexingResponse([{"objectIDs": ["a"]}], mock_index)
        with pytest.raises(ValidationError):
            response.task_ids

    async def test_wait_once_per_task(self, mock_index):
        response = BatchIndexingResponse([{"taskID": 1}, {"taskID": 2}], mock_index)

        await response.wait()
        await response.wait()

        assert [call.args[0] for call in mock_index.wait_task.await_args_list] == [1, 2]


class TestMultipleIndexBatchIndexingResponse:
    """Tests for batches spanning indices."""

    async def test_wait_per_index(self):
        client = MagicMock()
        client.wait_task = AsyncMock()
        response = MultipleIndexBatchIndexingResponse(
            {"taskID": {"a": 3, "b": 4}, "objectIDs": ["1"]}, client
        )

        assert isinstance(response.response, MultipleBatchResponse)
        assert response.object_ids == ["1"]
        await response.wait()

        assert [call.args[:2] for call in client.wait_task.await_args_list] == [
            ("a", 3),
            ("b", 4),
        ]


class TestNullResponse:
    """Tests for the response of operations with nothing to send."""

    def test_raw_response_is_not_shared(self):
        """Test that each instance owns its raw response."""
        NullResponse().raw_response["taskID"] = 1
        assert NullResponse().raw_response == {}

    async def test_wait_returns_self(self):
        response = NullResponse()
        assert await response.wait() is response
