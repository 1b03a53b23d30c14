import io


class AsyncBytesIO(io.BytesIO):
    """
    BytesIO wrapper that enables async reading.
    Useful for interfaces expecting an async file-like object.
    """
    async def read(self, *args, **kwargs):
        return super().read(*args, **kwargs)
