# millionaire/management/commands/kill_stale_games.py
from datetime import timedelta
import logging

from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils import timezone

from millionaire.engine import GameStatus
from millionaire.errors import InvalidStateError
from millionaire.models import Game
from millionaire.services import kill_game

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Kill in-progress games that ran past the time limit'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user-id',
            type=int,
            help='Only kill stale games of this user'
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be killed without killing'
        )

    def handle(self, *args, **options):
        limit = timedelta(minutes=settings.MILLIONAIRE_TIME_LIMIT_MINUTES)
        query = {
            'status': GameStatus.IN_PROGRESS.value,
            'created_at__lt': timezone.now() - limit,
        }

        if options.get('user_id'):
            query['user_id'] = options['user_id']
            self.stdout.write(f"Filtering by user ID: {options['user_id']}")

        stale = Game.objects.filter(**query).order_by('created_at')
        if not stale.exists():
            self.stdout.write(self.style.SUCCESS('No stale games found.'))
            return

        for game in stale:
            self.stdout.write(
                f"  Game {game.id:6d} | User: {game.user_id:5d} | "
                f"Level: {game.current_level:2d} | Started: {game.created_at:%Y-%m-%d %H:%M}"
            )

        if options['dry_run']:
            self.stdout.write(self.style.SUCCESS(f'DRY RUN: Would kill {stale.count()} game(s)'))
            return

        killed = 0
        for game in stale:
            try:
                game = kill_game(game)
            except InvalidStateError:
                # finished by its owner since the listing
                continue
            killed += 1
            logger.info(f"Killed stale game {game.id} with prize {game.prize}")

        self.stdout.write(self.style.SUCCESS(f'Killed {killed} stale game(s)'))
