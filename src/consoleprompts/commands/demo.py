"""consoleprompts demo — a guided tour of the prompt types.

Walks through a string, an integer, a date, a yes/no question and a
restyled float prompt on the console.
"""

import argparse
import sys
from datetime import date

from consoleprompts.config import build_prompter
from consoleprompts.hints import HintKeys
from consoleprompts.lib.log_lib import get_output
from consoleprompts.output import print_info, print_ok, print_step
from consoleprompts.streams import EndOfInputGuard


DRINKING_AGE = 21
TOTAL_STEPS = 5


def register(subparsers, parents):
    """Register the 'demo' subcommand."""
    p = subparsers.add_parser(
        "demo",
        parents=parents,
        help="Walk through the available prompt types",
        description=(
            "Interactive tour: string, number, date and yes/no prompts,\n"
            "then the same machinery with a different style."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.set_defaults(func=run)


def run(args):
    """Execute the demo command."""
    prompter = build_prompter(args, output_stream=sys.stdout,
                              input_stream=EndOfInputGuard(sys.stdin))
    print("Welcome to the consoleprompts demo!")

    print_step(1, TOTAL_STEPS, "Strings")
    name = prompter.prompt_for_string("What is your name").disallow_blank().display()
    print_ok(f"Hello, {name}")

    print_step(2, TOTAL_STEPS, "Numbers")
    age = prompter.prompt_for(int, "Your age").no_less_than(1).display()
    if age >= DRINKING_AGE:
        print_info("You are of drinking age!")
    else:
        print_info("Sorry, you can't have a drink.")

    print_step(3, TOTAL_STEPS, "Dates")
    birthday = prompter.prompt_for(date, "When is your birthday (YYYY-MM-DD)").display()
    if (birthday.month, birthday.day) == (date.today().month, date.today().day):
        print_info("Happy birthday!")
    else:
        print_info(f"Your birthday is on {birthday:%B %d}")

    print_step(4, TOTAL_STEPS, "Yes/no")
    likes_hexagons = prompter.prompt_for_bool("Do you like hexagons?", default=True).display()
    if likes_hexagons:
        print_info("Hexagons are the bestagons!")
    else:
        print_info("They are alright I guess...")

    print_step(5, TOTAL_STEPS, "Styling")
    prompter.prompt_format = "[{1}] {0} = "
    prompter.invalid_input_format = "I can't accept that: {0}"
    prompter.use_hint_preset("all")

    print_info("f(x) = 60 + 10x")
    x = (prompter.prompt_for(float, "x")
         .of_range(0, 1)
         .force_finite()
         .add_hint(HintKeys.TEXT, "real")
         .display())
    print_ok(f"f(x) = 60 + 10 * {x} = {60 + 10 * x}")

    print("This concludes the consoleprompts demo!")

    out = get_output()
    out.tip('style.config', 'result')
    out.tip('style.hints', 'result')
    return 0
