"""
Management command that runs the fixed demonstration expression
"(3 + 5) * (2 - 1)" through the pipeline and prints the result.
"""

from django.core.management.base import BaseCommand, CommandError

from arithmetic.utils import evaluate_expression

DEMO_EXPRESSION = "(3 + 5) * (2 - 1)"


class Command(BaseCommand):
    help = f"Evaluate the demonstration expression {DEMO_EXPRESSION}"

    def handle(self, *args, **options):
        result = evaluate_expression(DEMO_EXPRESSION)
        if result.is_err():
            raise CommandError(str(result.error))
        self.stdout.write(str(result.value))
