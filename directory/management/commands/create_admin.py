from django.core.management.base import BaseCommand, CommandError

from directory.models import User


class Command(BaseCommand):
    help = "Create an administrator, or promote an existing user to administrator."

    def add_arguments(self, parser):
        parser.add_argument('username')
        parser.add_argument('--password', help="Set (or reset) the password.")
        parser.add_argument('--name', default='', help="Display name.")

    def handle(self, *args, **opts):
        username = opts['username']
        password = opts.get('password')
        user, created = User.objects.get_or_create(username=username, defaults={'name': opts['name']})
        if created and not password:
            user.delete()
            raise CommandError("--password is required when creating a new administrator")
        user.role = User.ROLE_ADMIN
        user.is_staff = True
        if opts['name']:
            user.name = opts['name']
        if password:
            user.set_password(password)
        user.save()
        verb = "created" if created else "updated"
        self.stdout.write(self.style.SUCCESS(f"{verb}: {username} ({user.role})"))
