__version__ = "0.1.0"

# Package exports
from fieldrules.config import settings, get_settings
from fieldrules.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    unbind_context,
    rules_logger,
    messages_logger,
    form_logger,
)
from fieldrules.errors import ConfigurationError, MessageResolutionError, CatalogError
from fieldrules.messages import MessageCatalog, MessageKey, MessageResolver, use_messages
from fieldrules.validation import (
    compose,
    required,
    equal,
    not_equal,
    min,
    max,
    min_length,
    max_length,
    equal_length,
    email,
    match,
    numeric,
    integer,
    date_string,
    url,
    ip,
    credit_card,
    file,
    validate_form,
    ValidationMode,
    FormReport,
)
