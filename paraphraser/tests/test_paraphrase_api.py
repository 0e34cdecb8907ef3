import httpx
import pytest

from paraphraser.tests.stubs import TEST_API_KEY, RecordingStub, completion_body


class TestParaphraseRelay:
    def test_forwards_fixed_payload_with_credentials(self, client, provider):
        response = client.post("/api/paraphrase", json={"prompt": "hi"})

        assert response.status_code == 200
        assert len(provider.requests) == 1
        sent = provider.requests[0]
        assert sent.method == "POST"
        assert str(sent.url) == "https://api.openai.com/v1/chat/completions"
        assert sent.headers["authorization"] == f"Bearer {TEST_API_KEY}"
        assert sent.headers["content-type"].startswith("application/json")
        assert provider.last_body == {
            "model": "gpt-3.5-turbo",
            "messages": [{"role": "user", "content": "hi"}],
            "temperature": 1,
            "max_tokens": 500,
        }

    def test_returns_provider_json_verbatim(self, client):
        response = client.post("/api/paraphrase", json={"prompt": "hi"})

        assert response.json() == completion_body("Hello there.")

    def test_passes_through_unexpected_shapes(self, make_client):
        body = {"unexpected": ["shape"], "choices": []}
        stub = RecordingStub(lambda request: httpx.Response(200, json=body))
        with make_client(stub) as client:
            response = client.post("/api/paraphrase", json={"prompt": "hi"})

        assert response.status_code == 200
        assert response.json() == body

    @pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": None}])
    def test_missing_prompt_is_rejected_without_provider_call(self, client, provider, body):
        response = client.post("/api/paraphrase", json=body)

        assert response.status_code == 400
        assert response.json() == {"detail": "No prompt in the request"}
        assert provider.requests == []

    def test_request_without_body_is_rejected(self, client, provider):
        response = client.post("/api/paraphrase")

        assert response.status_code == 400
        assert provider.requests == []

    def test_completion_config_overrides_payload(self, settings, make_client, provider):
        settings.completion.model = "gpt-4o-mini"
        settings.completion.temperature = 0.2
        settings.completion.max_tokens = 64
        with make_client(provider) as client:
            client.post("/api/paraphrase", json={"prompt": "hi"})

        assert provider.last_body["model"] == "gpt-4o-mini"
        assert provider.last_body["temperature"] == 0.2
        assert provider.last_body["max_tokens"] == 64

    def test_each_submit_is_an_independent_provider_call(self, client, provider):
        client.post("/api/paraphrase", json={"prompt": "hi"})
        client.post("/api/paraphrase", json={"prompt": "hi"})

        assert len(provider.requests) == 2


class TestParaphraseRelayFailures:
    @pytest.mark.parametrize("status_code", [401, 429, 500])
    def test_provider_error_json_is_passed_through(self, make_client, status_code):
        body = {"error": {"message": "Rate limit reached", "type": "requests", "code": "rate_limit_exceeded"}}
        stub = RecordingStub(lambda request: httpx.Response(status_code, json=body))
        with make_client(stub) as client:
            response = client.post("/api/paraphrase", json={"prompt": "hi"})

        assert response.status_code == status_code
        assert response.json() == body
        assert len(stub.requests) == 1

    def test_provider_error_without_json_becomes_bad_gateway(self, make_client):
        stub = RecordingStub(lambda request: httpx.Response(503, text="Service Unavailable"))
        with make_client(stub) as client:
            response = client.post("/api/paraphrase", json={"prompt": "hi"})

        assert response.status_code == 502
        assert response.json()["detail"] == "Completion provider returned status 503"

    def test_provider_non_json_body_becomes_bad_gateway(self, make_client):
        stub = RecordingStub(lambda request: httpx.Response(200, text="<html>oops</html>"))
        with make_client(stub) as client:
            response = client.post("/api/paraphrase", json={"prompt": "hi"})

        assert response.status_code == 502
        assert response.json()["detail"] == "Completion provider returned a non-JSON body"

    def test_provider_undecodable_body_becomes_bad_gateway(self, make_client):
        stub = RecordingStub(lambda request: httpx.Response(200, content=b'{"x": "\xff\xfe"}'))
        with make_client(stub) as client:
            response = client.post("/api/paraphrase", json={"prompt": "hi"})

        assert response.status_code == 502
        assert response.json()["detail"] == "Completion provider returned a non-JSON body"

    def test_unreachable_provider_becomes_bad_gateway(self, make_client):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        stub = RecordingStub(refuse)
        with make_client(stub) as client:
            response = client.post("/api/paraphrase", json={"prompt": "hi"})

        assert response.status_code == 502
        assert response.json()["detail"] == "Completion provider is unreachable"
        assert len(stub.requests) == 1

    def test_provider_timeout_becomes_gateway_timeout(self, make_client):
        def hang(request):
            raise httpx.ReadTimeout("timed out", request=request)

        stub = RecordingStub(hang)
        with make_client(stub) as client:
            response = client.post("/api/paraphrase", json={"prompt": "hi"})

        assert response.status_code == 504
        assert response.json()["detail"] == "Completion provider timed out"
        assert len(stub.requests) == 1
