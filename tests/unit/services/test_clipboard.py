"""Unit tests for the clipboard service.

Tests cover:
- Backend selection from host capabilities
- Native strategy delegation and failure wrapping
- Legacy strategy DOM steps and guaranteed element cleanup
- Payload coercion to str
"""

import pytest

from tests.fixtures.clipboard_mock import (
    FakeDocument,
    FakeEnvironment,
    FakeNativeClipboard,
)
from walletkit.core.exceptions import ClipboardCopyError
from walletkit.services.clipboard import (
    OFFSCREEN_STYLE,
    ClipboardService,
    LegacyClipboard,
    NativeClipboard,
    select_backend,
)


class TestSelectBackend:
    """Tests for select_backend."""

    def test_secure_context_with_clipboard_uses_native(
        self, fake_native_clipboard: FakeNativeClipboard
    ) -> None:
        env = FakeEnvironment(is_secure_context=True, clipboard=fake_native_clipboard)

        assert isinstance(select_backend(env), NativeClipboard)

    def test_insecure_context_uses_legacy(
        self, fake_native_clipboard: FakeNativeClipboard
    ) -> None:
        env = FakeEnvironment(is_secure_context=False, clipboard=fake_native_clipboard)

        assert isinstance(select_backend(env), LegacyClipboard)

    def test_missing_clipboard_uses_legacy(self) -> None:
        env = FakeEnvironment(is_secure_context=True, clipboard=None)

        assert isinstance(select_backend(env), LegacyClipboard)


class TestNativeClipboard:
    """Tests for NativeClipboard."""

    @pytest.mark.asyncio
    async def test_writes_through_platform_writer(
        self, fake_native_clipboard: FakeNativeClipboard
    ) -> None:
        await NativeClipboard(fake_native_clipboard).write_text("bc1q")

        assert fake_native_clipboard.written == ["bc1q"]

    @pytest.mark.asyncio
    async def test_platform_error_is_wrapped(self) -> None:
        """
        Given: A platform writer that rejects (e.g. permission denied)
        When: Writing text
        Then: ClipboardCopyError is raised with the native strategy and cause
        """
        denied = PermissionError("Document is not focused")
        backend = NativeClipboard(FakeNativeClipboard(error=denied))

        with pytest.raises(ClipboardCopyError) as exc_info:
            await backend.write_text("bc1q")

        assert exc_info.value.strategy == "native"
        assert exc_info.value.__cause__ is denied


class TestLegacyClipboard:
    """Tests for LegacyClipboard."""

    @pytest.mark.asyncio
    async def test_copies_via_hidden_textarea(self, fake_document: FakeDocument) -> None:
        """
        Given: A document whose copy command succeeds
        When: Writing text with the legacy strategy
        Then: The text is copied from a focused, selected, off-screen textarea
        """
        await LegacyClipboard(fake_document).write_text("tx-123")

        assert fake_document.copied == ["tx-123"]
        assert fake_document.commands == ["copy"]
        (textarea,) = fake_document.created
        assert textarea.value == "tx-123"
        assert textarea.style == OFFSCREEN_STYLE
        assert textarea.focused and textarea.selected

    @pytest.mark.asyncio
    async def test_removes_textarea_after_success(self, fake_document: FakeDocument) -> None:
        await LegacyClipboard(fake_document).write_text("tx-123")

        assert fake_document.created[0].removed is True
        assert fake_document.body.children == []

    @pytest.mark.asyncio
    async def test_rejected_copy_raises_and_cleans_up(
        self, failing_document: FakeDocument
    ) -> None:
        """
        Given: A document whose copy command returns False
        When: Writing text
        Then: ClipboardCopyError is raised and the textarea is still removed
        """
        with pytest.raises(ClipboardCopyError, match="returned false") as exc_info:
            await LegacyClipboard(failing_document).write_text("tx-123")

        assert exc_info.value.strategy == "legacy"
        assert failing_document.created[0].removed is True
        assert failing_document.body.children == []

    @pytest.mark.asyncio
    async def test_command_exception_raises_and_cleans_up(self) -> None:
        boom = RuntimeError("execCommand unsupported")
        document = FakeDocument(copy_error=boom)

        with pytest.raises(ClipboardCopyError) as exc_info:
            await LegacyClipboard(document).write_text("tx-123")

        assert exc_info.value.__cause__ is boom
        assert document.created[0].removed is True
        assert document.body.children == []


class TestClipboardService:
    """Tests for ClipboardService."""

    @pytest.mark.asyncio
    async def test_copy_coerces_payload_to_str(
        self, fake_native_clipboard: FakeNativeClipboard
    ) -> None:
        service = ClipboardService(NativeClipboard(fake_native_clipboard))

        await service.copy(123)
        await service.copy(1.5)
        await service.copy("abc")

        assert fake_native_clipboard.written == ["123", "1.5", "abc"]

    @pytest.mark.asyncio
    async def test_from_environment_legacy_path(self, fake_document: FakeDocument) -> None:
        env = FakeEnvironment(is_secure_context=False, clipboard=None, document=fake_document)
        service = ClipboardService.from_environment(env)

        await service.copy("0.00000001")

        assert service.backend.name == "legacy"
        assert fake_document.copied == ["0.00000001"]

    @pytest.mark.asyncio
    async def test_backend_selected_once(
        self, fake_native_clipboard: FakeNativeClipboard, fake_document: FakeDocument
    ) -> None:
        """
        Given: A service built in a secure context
        When: The environment later reports an insecure context
        Then: The service keeps using the backend chosen at construction
        """
        env = FakeEnvironment(
            is_secure_context=True, clipboard=fake_native_clipboard, document=fake_document
        )
        service = ClipboardService.from_environment(env)
        env.is_secure_context = False

        await service.copy("abc")

        assert fake_native_clipboard.written == ["abc"]
        assert fake_document.created == []

    @pytest.mark.asyncio
    async def test_copy_failure_propagates(self, failing_document: FakeDocument) -> None:
        service = ClipboardService(LegacyClipboard(failing_document))

        with pytest.raises(ClipboardCopyError):
            await service.copy("abc")
