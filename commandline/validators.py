"""
Cross-field validators.

A validator is any callable

    validator(arguments, options, flags, activations)

receiving the per-parse bindings (tuples of ArgumentBinding, OptionBinding and
FlagBinding in registration order) and the activation log (a tuple of
Activation). It reports a failure by raising ValidationError (any
CommandLineException works). Validators run after the size checks, in the
order they were added to the configuration.

GroupValidator is the ready-made mutual-exclusion validator: options and flags
are put in named groups, and using members of more than one group in the same
command line is rejected.
"""
from .arguments import Flag, Kind, Option
from .faults import ValidationError
from .logger import logger


def _member_name(member, expected, /):
    if isinstance(member, str):
        return member
    if not isinstance(member, expected):
        raise TypeError(f"group members must be {expected.__typename__} specs or names")
    return member.name


class Group:
    """
    A set of options and flags that may be used together.

    Created by GroupValidator.add_group(); members are added by spec or by name,
    and an entity may belong to several groups.
    """

    def __init__(self, name, index, /):
        self._name = name
        self._index = index
        self._options = []
        self._flags = []

    @property
    def name(self):
        return self._name

    @property
    def index(self):
        return self._index

    @property
    def label(self):
        return self._name or str(self._index)

    def add_option(self, option, /):
        if (name := _member_name(option, Option)) not in self._options:
            self._options.append(name)
        return self

    def add_options(self, *options):
        for option in options:
            self.add_option(option)
        return self

    def add_flag(self, flag, /):
        if (name := _member_name(flag, Flag)) not in self._flags:
            self._flags.append(name)
        return self

    def add_flags(self, *flags):
        for flag in flags:
            self.add_flag(flag)
        return self

    def fired(self, activations, /):
        """
        Names of the members that were activated, in order of first activation.
        """
        names = {}
        for activation in activations:
            match activation.kind:
                case Kind.OPTION if activation.name in self._options:
                    names[activation.name] = activation.kind
                case Kind.FLAG if activation.name in self._flags:
                    names[activation.name] = activation.kind
        return tuple(names)

    def __repr__(self):
        return f"group({self.label!r}, options={tuple(self._options)!r}, flags={tuple(self._flags)!r})"


class GroupValidator:
    """
    Mutual exclusion between groups of options and flags.

    Example
        >>> validator = GroupValidator()
        >>> validator.add_group("read").add_option(source)
        >>> validator.add_group("write").add_flags(force, dry_run)
        >>> configuration.add_validator(validator)

    After a parse, a group is active when at least one of its members was used on
    the command line (defaults do not count). More than one active group raises
    ValidationError listing every active group with the prefixes of its fired
    members.
    """

    def __init__(self):
        self._groups = []

    @property
    def groups(self):
        return tuple(self._groups)

    def add_group(self, name=""):
        if not isinstance(name, str):
            raise TypeError("group 'name' must be a string")
        self._groups.append(group := Group(name, len(self._groups)))
        return group

    def __call__(self, arguments, options, flags, activations):
        prefixes = {binding.name: binding.spec.prefixes for binding in (*options, *flags)}

        active = []
        for group in self._groups:
            if fired := group.fired(activations):
                active.append((group, fired))
        logger.debug("active groups: %s", [group.label for group, _ in active])

        if len(active) > 1:
            raise ValidationError(
                "Options/flags from different groups can't be used together:\n" + "\n".join(
                    "Group %s %s" % (group.label, ", ".join("|".join(prefixes[name]) for name in fired))
                    for group, fired in active
                ),
                groups=tuple(group.label for group, _ in active),
            )


__all__ = (
    "Group",
    "GroupValidator",
)
