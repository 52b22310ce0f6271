"""
Dependency Injection Container.

The Injector loads capability mappings once and fills the marked fields of
any object handed to inject(). Per-field failures are reported and skipped.
"""

from typing import Callable, Optional, TypeVar

from core.config import Settings, get_settings
from core.errors import CapabilityUnresolvedError, FieldInjectionError
from core.logger import logger, format_exception_short
from domain.value_objects import InjectableField, Unresolved
from repositories.mapping_store import MappingStore, Source
from services.field_scanner import FieldScanner
from services.field_writer import FieldWriter
from services.instantiator import Instantiator
from services.resolver import Resolver, capability_id_for

T = TypeVar("T")

FailureHandler = Callable[[FieldInjectionError], None]


class Injector:
    """
    Field injector driven by a properties file.
    """

    def __init__(
        self,
        config_path: Source,
        *,
        encoding: str = "utf-8",
        strict_types: bool = True,
        instantiator: Optional[Instantiator] = None,
        on_failure: Optional[FailureHandler] = None,
    ):
        """
        Initialize injector and load the mapping configuration.

        Args:
            config_path: Properties file (or open text stream) mapping
                capability names to implementation names
            encoding: Encoding of the properties file
            strict_types: Reject implementations that are not instances of
                the field's declared type
            instantiator: Custom instantiator, e.g. one with a registry
            on_failure: Called with every per-field error after it is logged

        Raises:
            ConfigLoadError: If the configuration cannot be loaded
        """
        self._store = MappingStore(encoding=encoding)
        self._store.load(config_path)

        self._scanner = FieldScanner()
        self._resolver = Resolver()
        self._instantiator = instantiator or Instantiator()
        self._writer = FieldWriter(strict_types=strict_types)
        self._on_failure = on_failure

        logger.debug(f"Injector initialized with {len(self._store)} mapping(s)")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "Injector":
        """Build an injector from application settings."""
        settings = settings or get_settings()
        return cls(
            settings.injector_config_path,
            encoding=settings.injector_config_encoding,
            strict_types=settings.injector_strict_types,
            **kwargs,
        )

    @property
    def mapping(self) -> MappingStore:
        """Loaded capability mappings."""
        return self._store

    def inject(self, instance: T) -> T:
        """
        Inject dependencies into the marked fields of instance.

        Every marked field is resolved again on each call, overwriting any
        current value. Fields whose injection fails keep their value.

        Args:
            instance: Object to populate in place

        Returns:
            The same instance
        """
        fields = self._scanner.scan(instance)
        if not fields:
            return instance

        injected = 0
        for field in fields:
            try:
                self._inject_field(instance, field)
                injected += 1
            except FieldInjectionError as e:
                if e.capability_id is None:
                    e.capability_id = capability_id_for(field.declared_type)
                if e.field_name is None:
                    e.field_name = str(field)
                self._report(e)

        logger.info(
            f"Injected {injected}/{len(fields)} field(s) into {type(instance).__qualname__}"
        )
        return instance

    def _inject_field(self, instance, field: InjectableField):
        if field.evaluation_error is not None:
            raise CapabilityUnresolvedError(
                f"Cannot evaluate declared type: {field.evaluation_error}"
            )

        result = self._resolver.resolve(field, self._store)
        if isinstance(result, Unresolved):
            raise CapabilityUnresolvedError(
                f"Implementation class not found for capability: {result.capability_id}",
                capability_id=result.capability_id,
            )

        value = self._instantiator.instantiate(result.implementation_id)
        self._writer.write(instance, field, value)

    def _report(self, error: FieldInjectionError):
        if isinstance(error, CapabilityUnresolvedError):
            logger.warning(str(error))
        else:
            message = f"Failed to inject: {format_exception_short(error)}"
            if error.__cause__ is not None:
                message += f" (caused by {format_exception_short(error.__cause__)})"
            logger.error(message)

        if self._on_failure is not None:
            self._on_failure(error)
