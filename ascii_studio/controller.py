from ascii_studio.models import Notice


class Controller:
    """Shared notice handling for the client-side controllers."""

    def __init__(self, client):
        self.client = client
        self.notices = []

    def notify(self, title, description, variant="default"):
        notice = Notice(title=title, description=description, variant=variant)
        self.notices.append(notice)
        return notice

    def notify_error(self, description):
        return self.notify("Error", description, variant="destructive")
