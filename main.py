import tkinter as tk

from ddns_dashboard.logs import configure_logging, attach_panel_handler
from ddns_dashboard.notifier import Notifier
from ddns_dashboard.repository import ClientRegistry
from ddns_dashboard.session import DashboardSession
from ddns_dashboard.ui import AppUI


def main() -> None:
    configure_logging()
    registry = ClientRegistry.with_seed_clients()
    session = DashboardSession(registry, Notifier(enabled=True))

    root = tk.Tk()
    app = AppUI(root, session)
    attach_panel_handler(app.append_log)
    root.mainloop()


if __name__ == "__main__":
    main()
