# __init__.py
__version__ = "1.0.2"

from .controller import ProxyController
from .errors import BackendQueryRejected, BackendUnavailable, SerializationFailure, SolrCountError
from .models import BackendConfig, ProxyResult

__all__ = ['ProxyController', 'BackendConfig', 'ProxyResult', 'SolrCountError',
           'BackendUnavailable', 'BackendQueryRejected', 'SerializationFailure']
