import time
import uuid
import logging
from functools import wraps
from typing import Optional

from core.prometheus_metrics import prometheus_collector
from services.exceptions import FatalException

logger = logging.getLogger(__name__)


def track_performance(service_name: Optional[str] = None):
    """
    Decorator to automatically track method performance

    Expected domain outcomes (FatalException subclasses such as validation
    failures or empty results) are recorded as 'rejected' and logged at
    debug level; anything else is recorded as 'error'.

    Usage:
    @track_performance(service_name="VehicleService")
    def my_method(self, param1, param2):
        # method implementation
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            correlation_id = str(uuid.uuid4())

            actual_service_name = service_name or (args[0].__class__.__name__ if args else "Unknown")
            method_name = func.__name__

            start_time = time.perf_counter()
            status = "error"

            try:
                result = func(*args, **kwargs)
                status = "success"
                return result

            except FatalException as e:
                status = "rejected"
                logger.debug(f"{actual_service_name}.{method_name} rejected: {e}")
                raise

            except Exception as e:
                logger.error(f"Error in {actual_service_name}.{method_name}: {e}")
                raise

            finally:
                duration_seconds = time.perf_counter() - start_time

                prometheus_collector.record_service_call(
                    service_name=actual_service_name,
                    method_name=method_name,
                    duration_seconds=duration_seconds,
                    status=status
                )

                logger.info(
                    f"Method executed: {actual_service_name}.{method_name}",
                    extra={
                        'correlation_id': correlation_id,
                        'service_name': actual_service_name,
                        'method_name': method_name,
                        'duration_ms': duration_seconds * 1000,
                        'status': status
                    }
                )

        return wrapper
    return decorator
