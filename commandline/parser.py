"""
The parsing pipeline.

Stages (one Parser per parse; never reused)
1. Preprocess: split "-ovalue", "-abc" flag clusters and "--name=value" into a
   normalized token stream (see tokens.preprocess).
2. Dispatch: walk the stream once, left to right.
   - option-shaped token with an unregistered prefix → UnknownPrefixError
   - flag prefix → count one occurrence and fire the flag consumer
   - option prefix → take the next token as its value (NoValueError when it is
     missing or option-shaped), check it (CheckError), consume it, append it
   - positional → bind it to the next unbound argument in position order; once
     all are bound, append it to the remainder of the last one
     (UnhandledArgumentError when no argument is registered)
3. Defaults: options without values and unbound arguments receive their
   defaults (the first default is an argument's value, the rest its remainder).
4. Size checks, in this order: required arguments, the trailing-argument cap,
   options (required, max values), flags (required, max occurrences).
5. Validators, in registration order.

The first failure aborts the parse: errors from an earlier stage always win over
errors a later stage would have reported.
"""
from .arguments import Kind
from .bindings import *
from .faults import *
from .logger import logger
from .tokens import is_option, preprocess


class Parser:
    def __init__(self, configuration, /):
        self._configuration = configuration
        self._arguments = [ArgumentBinding(argument) for argument in configuration.arguments]
        self._options = {option.name: OptionBinding(option) for option in configuration.options}
        self._flags = {flag.name: FlagBinding(flag) for flag in configuration.flags}
        self._activations = []
        self._cursor = 0

    @property
    def arguments(self):
        return tuple(self._arguments)

    @property
    def options(self):
        return tuple(self._options.values())

    @property
    def flags(self):
        return tuple(self._flags.values())

    @property
    def activations(self):
        return tuple(self._activations)

    def parse(self, tokens, /):
        tokens = preprocess(tokens, self._configuration.has_flag_with_prefix)
        logger.debug("normalized tokens: %s", tokens)

        self._dispatch(tokens)
        self._apply_defaults()
        self._check_sizes()
        self._run_validators()
        return self

    # -- dispatch ------------------------------------------------------------

    def _dispatch(self, tokens):
        configuration = self._configuration
        iterator = enumerate(tokens)
        for index, token in iterator:
            if not is_option(token):
                self._handle_argument(token, index)
                continue

            if not configuration.is_prefix_registered(token):
                raise UnknownPrefixError(f"Unknown prefix {token}", prefix=token, index=index)

            if (flag := configuration.flag_by_prefix(token)) is not None:
                self._handle_flag(flag, token, index)
                continue

            _, value = next(iterator, (None, None))
            if value is None or is_option(value):
                raise NoValueError(
                    f"No value provided for option with prefix <{token}>",
                    prefix=token,
                    index=index,
                )
            self._handle_option(configuration.option_by_prefix(token), token, value, index)

    def _handle_flag(self, flag, prefix, index, /):
        logger.debug("token %d: flag %r via %s", index, flag.name, prefix)
        flag()
        self._flags[flag.name]._increment()
        self._activations.append(Activation(flag.name, Kind.FLAG, prefix, index))

    def _handle_option(self, option, prefix, value, index, /):
        logger.debug("token %d: option %r via %s = %r", index, option.name, prefix, value)
        if not option.accepts(value):
            raise CheckError(
                f"Option <{option.name}> can't have value <{value}>",
                name=option.name,
                value=value,
                index=index,
            )
        option(value)
        self._options[option.name]._append(value)
        self._activations.append(Activation(option.name, Kind.OPTION, prefix, index))

    def _handle_argument(self, value, index, /):
        if not self._arguments:
            raise UnhandledArgumentError(f"Unhandled argument <{value}>", value=value, index=index)

        remainder = self._cursor >= len(self._arguments)
        if remainder:
            binding = self._arguments[-1]
        else:
            binding = self._arguments[self._cursor]
            self._cursor += 1

        argument = binding.spec
        logger.debug(
            "token %d: %s %r = %r", index, "remainder of" if remainder else "argument", argument.name, value,
        )
        if not argument.accepts(value):
            raise CheckError(
                f"Argument <{argument.name}> can't have value <{value}>",
                name=argument.name,
                value=value,
                index=index,
            )
        argument(value)
        if remainder:
            binding._extend(value)
        else:
            binding._bind(value)
        self._activations.append(Activation(argument.name, Kind.ARGUMENT, value, index))

    # -- post-pass -----------------------------------------------------------

    def _apply_defaults(self):
        for binding in self._options.values():
            if (default := binding.spec.default) and not binding.values:
                logger.debug("option %r defaults to %s", binding.name, default)
                binding._fill(default)

        for binding in self._arguments:
            if (default := binding.spec.default) and not binding.bound:
                logger.debug("argument %r defaults to %s", binding.name, default)
                binding._fill(default)

    def _check_sizes(self):
        for binding in self._arguments:
            if binding.required and not binding.bound:
                raise SizeViolationError(
                    f"Argument <{binding.name}> is required, please provide value for it",
                    name=binding.name,
                )

        limit = self._configuration.max_last_argument_size
        if self._arguments and limit is not None:
            last = self._arguments[-1]
            if (size := len(last.values)) > limit:
                raise SizeViolationError(
                    f"{size} is too many values(max number is {limit}) for the last argument <{last.name}>",
                    name=last.name,
                )

        for binding in self._options.values():
            option = binding.spec
            if option.required and not binding.values:
                raise SizeViolationError(
                    f"Option <{option.name}> is required, please provide value for it",
                    name=option.name,
                )
            if (size := len(binding.values)) > option.max_values:
                raise SizeViolationError(
                    f"{size} is too many values(max number is {option.max_values}) for option <{option.name}>",
                    name=option.name,
                )

        for binding in self._flags.values():
            flag = binding.spec
            if flag.required and not binding.is_set:
                raise SizeViolationError(f"Flag <{flag.name}> is required", name=flag.name)
            if binding.count > flag.max_occurrences:
                raise SizeViolationError(
                    f"There're too many flags <{flag.name}> - {binding.count}, "
                    f"max number of values is {flag.max_occurrences}",
                    name=flag.name,
                )

    def _run_validators(self):
        for validator in self._configuration.validators:
            logger.debug("running validator %r", validator)
            validator(self.arguments, self.options, self.flags, self.activations)


__all__ = (
    "Parser",
)
