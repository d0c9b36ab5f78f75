"""
Object Factory

Declarative builder for test fixtures. A factory holds named attribute and
option generators, a shared sequence counter and a list of after-build
callbacks, and turns them into fully populated instances on ``build``.

Example::

    users = (Factory(lambda attrs: User(**attrs))
             .sequence('id')
             .uuid('token')
             .option('admin', False)
             .attr('role', lambda opts: 'admin' if opts['admin'] else 'user'))

    user = users.build({'name': 'Alice'}, {'admin': True})

Configuration methods mutate the factory and return it, so two chains that
start from the same factory share (and alias) its registries.
"""

import uuid as uuid_lib
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from config_factory import FactoryConfig, get_config_or_default
from factory_kit.utils.error_handling import (
    log_factory_action,
    log_factory_error,
    validate_callable,
    validate_count,
    validate_key,
)

T = TypeVar('T')

CreateFunction = Callable[[Dict[str, Any]], T]
AttributeGenerator = Callable[[Dict[str, Any]], Any]
OptionGenerator = Callable[[], Any]
AfterCallback = Callable[[T, Dict[str, Any]], None]
SequenceClosure = Callable[[int], Any]


class Factory(Generic[T]):
    """
    Registry of attribute/option generators plus a build pipeline.

    Options are resolved first, then attributes (which may read the resolved
    options), then the create function runs and finally every after-callback
    is invoked in registration order. Explicit values passed to ``build``
    always win and the matching generator is never called.
    """

    def __init__(self, create: CreateFunction, config: Optional[FactoryConfig] = None,
                 name: Optional[str] = None):
        """
        Initialize the factory.

        Args:
            create: Function turning the resolved attribute mapping into an instance
            config: Optional configuration, defaults to the global one
            name: Name used in log records, defaults to the create function's name
        """
        validate_callable(create, 'create function')
        self._create = create
        self._config = config if config is not None else get_config_or_default()
        self._sequence = self._config.sequence_start
        self._attributes: Dict[str, AttributeGenerator] = {}
        self._options: Dict[str, OptionGenerator] = {}
        self._after: List[AfterCallback] = []
        self.name = name or f"Factory[{getattr(create, '__name__', type(create).__name__)}]"

    def __repr__(self) -> str:
        return (f"<{self.name} attributes={list(self._attributes)} "
                f"options={list(self._options)} after={len(self._after)}>")

    @property
    def current_sequence(self) -> int:
        """Value the next sequence attribute will receive."""
        return self._sequence

    @property
    def attribute_names(self) -> Tuple[str, ...]:
        return tuple(self._attributes)

    @property
    def option_names(self) -> Tuple[str, ...]:
        return tuple(self._options)

    def _next_sequence(self) -> int:
        # the tick stays committed even if a later generator fails
        value = self._sequence
        self._sequence += 1
        return value

    # Registration

    def attr(self, key: str, value: Any) -> 'Factory[T]':
        """
        Define an attribute.

        A callable ``value`` is used as a generator and receives the resolved
        options on every build; anything else is returned as a constant. To
        store a callable as a constant, wrap it: ``attr(key, lambda _: func)``.
        """
        validate_key(key, 'attribute')
        if callable(value):
            generator = value
        else:
            def generator(options, _value=value):
                return _value
        self._attributes[key] = generator
        log_factory_action(self.name, f"Registered attribute '{key}'")
        return self

    def option(self, key: str, value: Any) -> 'Factory[T]':
        """
        Define an option available to attribute generators and after callbacks.

        A callable ``value`` is invoked with no arguments, and only when the
        option is not supplied to ``build``.
        """
        validate_key(key, 'option')
        if callable(value):
            generator = value
        else:
            def generator(_value=value):
                return _value
        self._options[key] = generator
        log_factory_action(self.name, f"Registered option '{key}'")
        return self

    def uuid(self, key: str) -> 'Factory[T]':
        """Define an attribute that gets a fresh random UUID string on every build."""
        def generator(options):
            value = str(uuid_lib.uuid4())
            return value.upper() if self._config.uuid_uppercase else value

        return self.attr(key, generator)

    def sequence(self, key: str, closure: Optional[SequenceClosure] = None) -> 'Factory[T]':
        """
        Define an attribute that auto-increments every time it is generated.

        The counter is shared by all sequence attributes of this factory. When
        ``closure`` is given it receives the sequence value and its result is
        used instead, e.g. ``sequence('email', lambda n: f'user{n}@example.com')``.
        """
        if closure is not None:
            validate_callable(closure, 'sequence closure')

        def generator(options):
            value = self._next_sequence()
            if closure is not None:
                return closure(value)
            return value

        return self.attr(key, generator)

    def after(self, callback: AfterCallback) -> 'Factory[T]':
        """Add a callback invoked with ``(instance, options)`` right after creation."""
        validate_callable(callback, 'after callback')
        self._after.append(callback)
        log_factory_action(self.name, f"Registered after callback #{len(self._after)}")
        return self

    # Resolution

    def resolve_options(self, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Fill every option missing from ``options`` from its generator."""
        resolved = dict(options or {})
        for key, generator in self._options.items():
            if key in resolved:
                continue
            try:
                resolved[key] = generator()
            except Exception as e:
                log_factory_error(self.name, 'options', e, {'key': key})
                raise
        return resolved

    def resolve_attributes(self, attributes: Optional[Dict[str, Any]] = None,
                           options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Fill every attribute missing from ``attributes`` from its generator."""
        resolved = dict(attributes or {})
        options = options if options is not None else {}
        for key, generator in self._attributes.items():
            if key in resolved:
                continue
            try:
                resolved[key] = generator(options)
            except Exception as e:
                log_factory_error(self.name, 'attributes', e, {'key': key})
                raise
        return resolved

    # Building

    def build(self, attributes: Optional[Dict[str, Any]] = None,
              options: Optional[Dict[str, Any]] = None) -> T:
        """
        Build one instance.

        Args:
            attributes: Explicit attribute values, overriding generators
            options: Explicit option values, overriding option generators

        Returns:
            The created instance, after all callbacks ran

        Any exception raised by a generator, the create function or a
        callback propagates unchanged and aborts the rest of the pipeline.
        """
        resolved_options = self.resolve_options(options)
        resolved_attributes = self.resolve_attributes(attributes, resolved_options)

        try:
            instance = self._create(resolved_attributes)
        except Exception as e:
            log_factory_error(self.name, 'create', e, {'attributes': list(resolved_attributes)})
            raise

        for index, callback in enumerate(self._after):
            try:
                callback(instance, resolved_options)
            except Exception as e:
                log_factory_error(self.name, 'after', e, {'callback': index})
                raise

        log_factory_action(self.name, "Built instance",
                           {'attributes': list(resolved_attributes), 'options': list(resolved_options)})
        return instance

    def build_batch(self, count: int, attributes: Optional[Dict[str, Any]] = None,
                    options: Optional[Dict[str, Any]] = None) -> List[T]:
        """Build ``count`` independent instances with the same overrides."""
        validate_count(count)
        return [self.build(attributes, options) for _ in range(count)]
