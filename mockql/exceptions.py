import traceback


class MockqlError(Exception):
    def __init__(
        self,
        message: str,
        data: dict = None,
        wrapped_exception: Exception = None,
    ):
        super().__init__(message)
        self.data = data or {}
        self.wrapped_exception = wrapped_exception
        self.wrapped_traceback = None
        if wrapped_exception:
            self.wrapped_traceback = traceback.format_exc()

    def to_dict(self):
        return {
            'message': str(self),
            'data': self.data,
        }


class StoreError(MockqlError):
    pass


class ValidationError(MockqlError):
    pass


class ReferentialIntegrityError(MockqlError):
    pass


class SchemaBindingError(MockqlError):
    pass
