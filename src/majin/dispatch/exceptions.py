"""
Dispatch failures, one class per ``ErrorKind``
"""

from majin.core.exceptions import ErrorKind, GenerationError


class InvalidRequestError(GenerationError):
    """Model name or prompt missing"""

    kind = ErrorKind.INVALID_REQUEST


class ModelUnavailableError(GenerationError):
    """No active model with the requested name"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, model_name: str, **kwargs):
        self.model_name = model_name
        super().__init__(f"Model '{model_name}' not found or not active", **kwargs)


class MissingCredentialError(GenerationError):
    """The stored model has no API key"""

    kind = ErrorKind.MISSING_CREDENTIAL

    def __init__(self, model_name: str, **kwargs):
        self.model_name = model_name
        super().__init__(f"API key for model '{model_name}' is missing", **kwargs)


class UnsupportedProviderError(GenerationError):
    """Provider tag is not in the adapter table"""

    kind = ErrorKind.UNSUPPORTED_PROVIDER

    def __init__(self, provider: str, **kwargs):
        self.provider = provider
        super().__init__(f"Provider '{provider}' not supported.", **kwargs)


class EmptyCompletionError(GenerationError):
    """The adapter ran but produced no usable text"""

    kind = ErrorKind.EMPTY_COMPLETION

    def __init__(self, model_name: str, **kwargs):
        self.model_name = model_name
        super().__init__(
            f"Failed to generate content from LLM: '{model_name}' returned no text",
            **kwargs,
        )
