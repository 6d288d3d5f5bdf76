from rich.pretty import pprint

from commandline import *


def calculator():
    configuration = Configuration("Simple calculator: sums, multiplies or subtracts integers")
    configuration.add_required_argument(
        "numbers",
        checker=is_integer(),
        default="0",
        description="integers to operate on",
    )
    configuration.add_option(
        "operation",
        "-o",
        "--operation",
        checker=choice("sum", "prod", "sub"),
        default="sum",
        description="operation to perform: sum, prod or sub",
    )
    configuration.add_flag("verbose", "-v", "--verbose", description="print the parse result")
    return configuration


def compute(operation, numbers):
    result, *numbers = map(int, numbers)
    for number in numbers:
        match operation:
            case "sum":
                result += number
            case "prod":
                result *= number
            case "sub":
                result -= number
    return result


if __name__ == '__main__':
    configuration = calculator()
    command_line = get_command_line(configuration, on_error=make_exception_handler())
    if command_line.is_flag_set("verbose"):
        pprint(command_line)
    print(compute(command_line.get("operation").first, command_line.get("numbers")))
