"""
Unit tests for language-aware generation (the gateway is faked).
"""

import httpx
import pytest
from openai import APIConnectionError, APIStatusError
from promptsmith.exceptions import (
    EmptyPromptError,
    PaymentRequiredError,
    RateLimitedError,
    UpstreamError,
)
from promptsmith.services import llm

GATEWAY_URL = "https://gateway.test/v1/chat/completions"

def status_error(status: int) -> APIStatusError:
    request = httpx.Request("POST", GATEWAY_URL)
    response = httpx.Response(status, request=request, json={"error": "nope"})
    return APIStatusError("gateway said no", response=response, body={"error": "nope"})

class TestSystemInstruction:
    """Test the instruction sent to the gateway."""

    def test_uses_framework_guide(self):
        instruction = llm.build_system_instruction("race")
        assert "RACE Framework - Role, Action, Context, Explanation structure" in instruction
        assert "Framework: race" in instruction

    def test_unknown_framework_uses_standard_guide(self):
        instruction = llm.build_system_instruction("mystery")
        assert "Standard Prompt - General use prompt generation" in instruction

class TestGeneratePrompt:
    """Test the gateway call and its error taxonomy."""

    def test_returns_generated_text(self, fake_gateway):
        completions = fake_gateway(content="  Rol: Asesor experto\nAcción: ...  ")
        result = llm.generate_prompt("Escribe un correo de agradecimiento", "race")
        assert result == "Rol: Asesor experto\nAcción: ..."

        call = completions.calls[0]
        assert call["messages"][0]["role"] == "system"
        assert call["messages"][1] == {"role": "user", "content": "Escribe un correo de agradecimiento"}
        assert call["model"] == llm.config.AI_GATEWAY_MODEL

    def test_model_override(self, fake_gateway):
        completions = fake_gateway(content="ok")
        llm.generate_prompt("anything", model="some/other-model")
        assert completions.calls[0]["model"] == "some/other-model"

    def test_rate_limited(self, fake_gateway):
        fake_gateway(error=status_error(429))
        with pytest.raises(RateLimitedError) as exc:
            llm.generate_prompt("anything")
        assert exc.value.status_code == 429
        assert exc.value.message == "Rate limit exceeded. Please try again later."

    def test_payment_required(self, fake_gateway):
        fake_gateway(error=status_error(402))
        with pytest.raises(PaymentRequiredError) as exc:
            llm.generate_prompt("anything")
        assert exc.value.status_code == 402

    def test_other_status_is_generic(self, fake_gateway):
        fake_gateway(error=status_error(503))
        with pytest.raises(UpstreamError, match="AI gateway error"):
            llm.generate_prompt("anything")

    def test_connection_failure(self, fake_gateway):
        fake_gateway(error=APIConnectionError(request=httpx.Request("POST", GATEWAY_URL)))
        with pytest.raises(UpstreamError):
            llm.generate_prompt("anything")

    def test_no_retry(self, fake_gateway):
        completions = fake_gateway(error=status_error(429))
        with pytest.raises(RateLimitedError):
            llm.generate_prompt("anything")
        assert len(completions.calls) == 1

    def test_empty_reply(self, fake_gateway):
        fake_gateway(content=None)
        with pytest.raises(UpstreamError):
            llm.generate_prompt("anything")

    def test_empty_input(self, fake_gateway):
        completions = fake_gateway(content="ok")
        with pytest.raises(EmptyPromptError, match="Input required"):
            llm.generate_prompt("   ")
        assert completions.calls == []

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.setattr(llm, "_client", None)
        monkeypatch.delenv("AI_GATEWAY_API_KEY", raising=False)
        monkeypatch.delenv("LOVABLE_API_KEY", raising=False)
        with pytest.raises(UpstreamError, match="not configured"):
            llm.generate_prompt("anything")
