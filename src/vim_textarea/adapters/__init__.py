"""Host adapters for embedding ``VimTextArea`` in UI toolkits."""

__all__ = ["textual"]
