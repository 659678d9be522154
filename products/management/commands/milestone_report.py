from django.core.management.base import BaseCommand, CommandError

from products.exceptions import InvalidArgumentError
from products.services.milestone_service import compute_milestone_progress, compute_badge_tier
from products.services.vote_badge_service import get_vote_tier


class Command(BaseCommand):
    help = "Show milestone progress, badge and popularity tier for vote counts"

    def add_arguments(self, parser):
        parser.add_argument(
            'counts',
            nargs='+',
            type=int,
            help='One or more vote counts (e.g. 0 100 150000)'
        )

    def handle(self, *args, **options):
        for count in options['counts']:
            try:
                progress = compute_milestone_progress(count)
                badge = compute_badge_tier(count)
                tier = get_vote_tier(count)
            except InvalidArgumentError as e:
                raise CommandError(str(e))

            self.stdout.write(f"{count} votes ({tier['emoji']} {tier['name']})")
            self.stdout.write(
                f"  Progress: {progress.progress_percent:.1f}% "
                f"from {progress.previous_milestone} to {progress.current_milestone}"
                + (" (complete)" if progress.is_complete else "")
            )
            if badge:
                self.stdout.write(f"  Badge: {badge.name} x{badge.level} ({badge.milestone} milestone)")
            else:
                self.stdout.write("  Badge: none")

        self.stdout.write(self.style.SUCCESS(f"Reported {len(options['counts'])} vote counts."))
