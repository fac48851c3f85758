"""
Command to check and regroup class strings.

Usage:
    # Check the arguments of a call, one string per argument
    python -m classgroups "hover:bg-red" "bg-blue hover:text-white"

    # Check a single attribute value and show the wrapped form
    python -m classgroups --leaf "px-2 hover:bg-blue focus:ring-2"

    # Output as JSON
    python -m classgroups --output json "bg-red hover:text-white"
"""
import argparse
import json
import logging
import sys

from classgroups.models import RewritePlan, WrapPlan
from classgroups.options import GroupingOptions
from classgroups.services.checker import build_slots, check_leaf, check_slots
from classgroups.services.sorter import canonicalize
from classgroups.services.rewrite_planner import literal_tokens

VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
    3: logging.DEBUG,
}


class Command:
    help = 'Check class strings for modifier grouping and print the canonical form'

    def __init__(self, stdout=None, stderr=None):
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def add_arguments(self, parser):
        parser.add_argument(
            'strings',
            nargs='+',
            help='Class strings, one per call argument'
        )
        parser.add_argument(
            '--leaf',
            action='store_true',
            help='Treat the strings as one attribute value and use the wrap form'
        )
        parser.add_argument(
            '--wrap',
            type=str,
            default=None,
            help='Wrapper function name for the wrap form (default: cn)'
        )
        parser.add_argument(
            '--output',
            type=str,
            choices=['text', 'json'],
            default='text',
            help='Output format (default: text)'
        )
        parser.add_argument(
            '--verbosity',
            type=int,
            choices=[0, 1, 2, 3],
            default=0,
            help='Logging verbosity (default: 0)'
        )

    def create_parser(self, prog=None):
        parser = argparse.ArgumentParser(prog=prog, description=self.help)
        self.add_arguments(parser)
        return parser

    def run_from_argv(self, argv):
        parser = self.create_parser(prog='classgroups')
        options = vars(parser.parse_args(argv))
        return self.handle(**options)

    def handle(self, *args, **options):
        logging.basicConfig(level=VERBOSITY_LEVELS[options['verbosity']])

        grouping_options = GroupingOptions.from_mapping(
            {'wrapper_name': options['wrap']} if options['wrap'] else None
        )
        strings = options['strings']

        if options['leaf']:
            diagnostic = check_leaf(' '.join(strings), grouping_options)
        else:
            diagnostic = check_slots(build_slots(strings))

        groups = canonicalize(literal_tokens(strings))
        result = {
            'input': strings,
            'violation': diagnostic.message_id if diagnostic else None,
            'message': diagnostic.message if diagnostic else None,
            'groups': [
                {'modifier': group.modifier, 'classes': list(group.tokens)}
                for group in groups
            ],
            'rewrite': self._rewrite_of(diagnostic),
        }

        if options['output'] == 'json':
            self.stdout.write(json.dumps(result, indent=2) + '\n')
        else:
            self._write_text(result)

        return 1 if diagnostic else 0

    def _rewrite_of(self, diagnostic):
        if diagnostic is None:
            return None
        plan = diagnostic.plan
        if isinstance(plan, WrapPlan):
            return plan.expression
        if isinstance(plan, RewritePlan):
            return plan.literal_texts
        return None

    def _write_text(self, result):
        if result['violation'] is None:
            self.stdout.write('OK: classes are properly grouped\n')
        else:
            self.stderr.write(f"{result['violation']}: {result['message']}\n")

        self.stdout.write('\nCanonical groups:\n')
        for group in result['groups']:
            label = group['modifier'] or '(base)'
            self.stdout.write(f"  {label:<20} {' '.join(group['classes'])}\n")

        rewrite = result['rewrite']
        if isinstance(rewrite, str):
            self.stdout.write(f'\nRewrite: {rewrite}\n')
        elif rewrite:
            self.stdout.write('\nRewrite:\n')
            for text in rewrite:
                self.stdout.write(f'  "{text}"\n')


def main(argv=None):
    return Command().run_from_argv(sys.argv[1:] if argv is None else argv)
