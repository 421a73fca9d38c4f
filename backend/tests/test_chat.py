"""Tests for the POST /api/chat-ai endpoint.

Covers:
- Patient profile resolution (request body, stored session, defaults)
- Chat history logging
- Anamnesis tag extraction
- In-character fallback when the model fails
"""

from unittest.mock import AsyncMock, MagicMock, call, patch

import pytest

from app.routes.chat import FALLBACK_ANSWER

CHAT_URL = "/api/chat-ai"
HISTORY_LIMIT = 20


@pytest.fixture
def mock_chat_service():
    """Patch PatientChatService where the route constructs it."""
    with patch("app.routes.chat.PatientChatService") as service_cls:
        service = MagicMock()
        service.generate_reply = AsyncMock(
            return_value="Sudah tiga hari dok. [DURASI:3 hari][KELUHAN:Gigi ngilu]"
        )
        service.close = AsyncMock()
        service_cls.return_value = service
        yield service


@pytest.fixture(autouse=True)
def fixed_history_limit():
    with patch("app.routes.chat.settings") as mock_settings:
        mock_settings.chat_history_limit = HISTORY_LIMIT
        yield


class TestChatAI:
    """Tests for the roleplay chat endpoint."""

    @pytest.mark.asyncio
    async def test_returns_answer_and_tags(self, client, auth_headers, mock_chat_service):
        response = await client.post(
            CHAT_URL,
            json={"pesan": "Sudah berapa lama sakitnya?", "konteksPenyakit": "Pulpitis"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {
            "jawaban": "Sudah tiga hari dok. [DURASI:3 hari][KELUHAN:Gigi ngilu]",
            "tags": {"DURASI": "3 hari", "KELUHAN": "Gigi ngilu"},
        }
        mock_chat_service.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_prompt_uses_request_profile(
        self, client, auth_headers, user_repo, mock_chat_service
    ):
        await client.post(
            CHAT_URL,
            json={
                "robloxId": "42",
                "pesan": "Namanya siapa?",
                "konteksPenyakit": "Gusi berdarah",
                "patientProfile": {"name": "Dewi", "age": 27, "gender": "Female"},
            },
            headers=auth_headers,
        )

        system_prompt, question = mock_chat_service.generate_reply.call_args.args
        assert "bernama Dewi (Female, 27 tahun)" in system_prompt
        assert '"Gusi berdarah"' in system_prompt
        assert question == "Namanya siapa?"
        user_repo.get_patient_session.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_prompt_falls_back_to_stored_session(
        self, client, auth_headers, user_repo, mock_chat_service
    ):
        user_repo.get_patient_session.return_value = {"name": "Joko", "age": 51, "gender": "Male"}

        await client.post(
            CHAT_URL, json={"robloxId": "42", "pesan": "Halo"}, headers=auth_headers
        )

        user_repo.get_patient_session.assert_awaited_once_with("42")
        system_prompt = mock_chat_service.generate_reply.call_args.args[0]
        assert "bernama Joko (Male, 51 tahun)" in system_prompt

    @pytest.mark.asyncio
    async def test_empty_profile_falls_back_to_stored_session(
        self, client, auth_headers, user_repo, mock_chat_service
    ):
        user_repo.get_patient_session.return_value = {"name": "Siti", "age": 28, "gender": "Female"}

        await client.post(
            CHAT_URL,
            json={"robloxId": "42", "pesan": "Halo", "patientProfile": {}},
            headers=auth_headers,
        )

        user_repo.get_patient_session.assert_awaited_once_with("42")
        system_prompt = mock_chat_service.generate_reply.call_args.args[0]
        assert "bernama Siti (Female, 28 tahun)" in system_prompt

    @pytest.mark.asyncio
    async def test_prompt_defaults_without_profile(self, client, auth_headers, mock_chat_service):
        await client.post(CHAT_URL, json={"pesan": "Halo"}, headers=auth_headers)

        system_prompt = mock_chat_service.generate_reply.call_args.args[0]
        assert "bernama Pasien (Male, 25 tahun)" in system_prompt

    @pytest.mark.asyncio
    async def test_logs_both_turns(self, client, auth_headers, user_repo, mock_chat_service):
        await client.post(
            CHAT_URL, json={"robloxId": "42", "pesan": "Sakit di mana?"}, headers=auth_headers
        )

        assert user_repo.append_chat.await_args_list == [
            call("42", "user", "Sakit di mana?", HISTORY_LIMIT),
            call(
                "42",
                "model",
                "Sudah tiga hari dok. [DURASI:3 hari][KELUHAN:Gigi ngilu]",
                HISTORY_LIMIT,
            ),
        ]

    @pytest.mark.asyncio
    async def test_anonymous_chat_not_logged(
        self, client, auth_headers, user_repo, mock_chat_service
    ):
        await client.post(CHAT_URL, json={"pesan": "Halo"}, headers=auth_headers)

        user_repo.append_chat.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_model_failure_returns_fallback(
        self, client, auth_headers, user_repo, mock_chat_service
    ):
        mock_chat_service.generate_reply.side_effect = RuntimeError("Empty response")

        response = await client.post(
            CHAT_URL, json={"robloxId": "42", "pesan": "Halo"}, headers=auth_headers
        )

        assert response.status_code == 500
        assert response.json() == {"jawaban": FALLBACK_ANSWER}
        mock_chat_service.close.assert_awaited_once()
        # Only the question is logged
        assert user_repo.append_chat.await_count == 1

    @pytest.mark.asyncio
    async def test_missing_api_key_returns_fallback(self, client, auth_headers):
        with patch(
            "app.routes.chat.PatientChatService",
            side_effect=ValueError("GEMINI_API_KEY environment variable is required."),
        ):
            response = await client.post(CHAT_URL, json={"pesan": "Halo"}, headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["jawaban"] == FALLBACK_ANSWER

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"pesan": ""}, {"pesan": "x" * 4001}])
    async def test_invalid_message(self, client, auth_headers, mock_chat_service, body):
        response = await client.post(CHAT_URL, json=body, headers=auth_headers)

        assert response.status_code == 422
        mock_chat_service.generate_reply.assert_not_awaited()
