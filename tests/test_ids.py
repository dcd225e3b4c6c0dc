"""Unit tests for message id generation."""
from appchat.session import generate_id
from appchat.session.ids import MESSAGE_ID_PREFIX


class TestGenerateId:
    """Tests for generate_id."""

    def test_id_has_prefix(self):
        """Test that ids carry the message prefix."""
        assert generate_id().startswith(MESSAGE_ID_PREFIX)

    def test_ids_are_unique(self):
        """Test that many ids generated back to back never collide."""
        ids = {generate_id() for _ in range(5000)}
        assert len(ids) == 5000

    def test_id_is_hex_after_prefix(self):
        """Test that the suffix is a 32 character hex string."""
        suffix = generate_id()[len(MESSAGE_ID_PREFIX):]
        assert len(suffix) == 32
        int(suffix, 16)
