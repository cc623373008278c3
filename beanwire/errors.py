from beanwire.common import class_name


class BeanwireException(Exception):
    """Base exception class for beanwire exceptions."""


class RegistrationError(BeanwireException):
    """Base class for exceptions risen while registering beans."""


class NotAStructError(RegistrationError):
    """
    Exception risen when a value that is not an instance of a user-defined class
    is registered as a bean."""

    def __init__(self, value):
        super().__init__(
            f"Cannot register {value!r} of type '{class_name(type(value))}': "
            "a bean must be an instance of a user-defined class, "
            "or a weak reference to one."
        )


class DuplicateRegistrationError(RegistrationError):
    """
    Exception risen when registering a bean whose type identifier is already
    used by another registered bean."""

    def __init__(self, type_id: str):
        self.type_id = type_id
        super().__init__(f"'{type_id}' is already a registered type.")


class InjectionError(BeanwireException):
    """Base class for structural failures risen while injecting beans."""


class UnreadableFieldError(InjectionError):
    """
    Exception risen when the fields of a bean type cannot be read, because its
    type annotations cannot be evaluated."""

    def __init__(self, bean_type, cause):
        super().__init__(
            f"Cannot read the fields of '{class_name(bean_type)}': {cause}. "
            "If the class refers to locally defined types, decorate it with "
            "the `@bean()` decorator defined in `beanwire`."
        )


class FieldAssignmentError(InjectionError):
    """Exception risen when a resolved bean cannot be assigned to a field."""

    def __init__(self, bean_type, field_name, cause):
        super().__init__(
            f"Cannot assign field '{field_name}' "
            f"of '{class_name(bean_type)}': {cause}"
        )
