"""
Management command for browsing the conventions
"""
from django.core.management.base import BaseCommand, CommandError

from conventions.catalog import CATALOG
from conventions.layout import ProjectLayoutTemplate
from conventions.naming import SUBJECT_KINDS, describe_test_location
from core.exceptions import ConventionError


class Command(BaseCommand):
    help = "Browse the convention catalog, the project layout and test naming"

    def add_arguments(self, parser):
        parser.add_argument(
            'action',
            choices=['list', 'show', 'layout', 'name'],
            help='Action to perform'
        )
        parser.add_argument(
            'rule_id',
            nargs='?',
            help='Rule id (for show)'
        )
        parser.add_argument(
            '--category',
            help='Only list rules in this category (for list)'
        )
        parser.add_argument(
            '--apps',
            default='',
            help='Comma-separated app names (for layout)'
        )
        parser.add_argument('--source', help='Source module path (for name)')
        parser.add_argument('--kind', choices=SUBJECT_KINDS, help='Subject kind (for name)')
        parser.add_argument('--name', help='Subject name, Owner.member for methods and endpoints')

    def handle(self, *args, **options):
        action = options['action']

        try:
            if action == 'list':
                self.list_rules(options['category'])
            elif action == 'show':
                self.show_rule(options['rule_id'])
            elif action == 'layout':
                self.show_layout(options['apps'])
            elif action == 'name':
                self.name_test(options['source'], options['kind'], options['name'])
        except (ConventionError, ValueError) as e:
            raise CommandError(str(e))

    def list_rules(self, category):
        """List rules, optionally for one category"""
        rules = CATALOG.by_category(category) if category else CATALOG.all()

        if not rules:
            self.stdout.write(self.style.WARNING('No rules found'))
            return

        self.stdout.write('=' * 70)
        self.stdout.write(self.style.SUCCESS('Conventions'))
        self.stdout.write('=' * 70)

        current = None
        for rule in rules:
            if rule.category is not current:
                current = rule.category
                self.stdout.write(f"\n{self.style.MIGRATE_HEADING(current.value.upper())}")
            self.stdout.write(f"  {rule.id:<28} {rule.title}")

    def show_rule(self, rule_id):
        """Show one rule with its snippet"""
        if not rule_id:
            raise CommandError('Rule id required')

        rule = CATALOG.get(rule_id)

        self.stdout.write(self.style.SUCCESS(f"{rule.id}: {rule.title}"))
        self.stdout.write(f"  Category: {rule.category.value}")
        self.stdout.write(f"  Subject: {rule.subject}")
        if rule.placement:
            self.stdout.write(f"  Placement: {rule.placement}")
        if rule.pattern:
            self.stdout.write(f"  Pattern: {rule.pattern}")
        if rule.example:
            self.stdout.write(f"  Example: {rule.example}")
        self.stdout.write(f"\n{rule.description}\n")
        if rule.snippet:
            self.stdout.write(rule.snippet)

    def show_layout(self, apps):
        """Print the expected layout tree"""
        app_names = [name.strip() for name in apps.split(',') if name.strip()]
        template = ProjectLayoutTemplate(app_names or None)
        self.stdout.write(template.render())

    def name_test(self, source, kind, name):
        """Derive the test location for a subject"""
        missing = [
            flag for flag, value in (('--source', source), ('--kind', kind), ('--name', name))
            if not value
        ]
        if missing:
            raise CommandError(f"Missing required options for name: {', '.join(missing)}")

        location = describe_test_location(source, kind, name)

        self.stdout.write(f"Module: {location.module_path}")
        self.stdout.write(f"Class:  {location.class_name}")
        self.stdout.write(self.style.SUCCESS(location.node_id))
