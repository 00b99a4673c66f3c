"""Handler for the admin command."""

import asyncio
import getpass
from ..admin import TemplateWorkingCopy, check_admin_password
from ..errors import UnknownTemplateError
from ..interfaces import ILogSink, INotifier


class AdminHandler:
    """Handler for admin command - template management session."""

    def __init__(self, notifier: INotifier, logger: ILogSink):
        self.notifier = notifier
        self.logger = logger

    async def _read_password(self, args) -> str:
        if getattr(args, "password", None):
            return args.password
        return await asyncio.to_thread(getpass.getpass, "Admin password: ")

    async def handle(self, args) -> None:
        """Handle admin command."""
        password = await self._read_password(args)

        # Early validation
        if not check_admin_password(password):
            self.logger.log("warn", "Rejected admin login")
            await self.notifier.notify("error", "Error", "Incorrect password.")
            return

        await self.notifier.notify("info", "Success", "Logged in as Admin.")
        working_copy = TemplateWorkingCopy()

        for template_id in getattr(args, "delete", None) or []:
            try:
                deleted = working_copy.delete(template_id)
            except UnknownTemplateError as e:
                await self.notifier.notify("error", "Error", str(e))
                continue
            if deleted:
                self.logger.log("info", f"Template {template_id} deleted")
                await self.notifier.notify(
                    "info",
                    "Form Deleted",
                    "The form template has been successfully deleted."
                )

        if not working_copy.templates:
            print("No form templates found.")
            return
        for template in working_copy.templates:
            print(f"[{template.icon}] {template.label}")
