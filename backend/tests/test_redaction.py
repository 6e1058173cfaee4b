from statushook.utils.redaction import redact_text


def test_redaction_masks_tokens_and_webhook_urls() -> None:
    raw = (
        "POST http://relay/?token=eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiJhcGV4In0.sig "
        "to https://discord.com/api/webhooks/123/secret-part failed secret=hunter2"
    )
    redacted = redact_text(raw)
    assert "eyJhbGciOiJIUzI1NiJ9" not in redacted
    assert "secret-part" not in redacted
    assert "hunter2" not in redacted
    assert "[REDACTED]" in redacted


def test_bare_jwt_is_masked() -> None:
    redacted = redact_text("Invalid token eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiJhcGV4In0.c2ln")
    assert "eyJ" not in redacted
