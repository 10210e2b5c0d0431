"""
Design (ui.py)
- Purpose: Build and manage the Tkinter UI (stats cards, Treeview, dialogs, sorting, clicks).
- Inputs: DashboardSession (form state + registry).
- Outputs: None (renders UI, routes user actions to the session).
- Side effects: Creates windows; opens web browser for DDNS links.
- Thread-safety: UI code runs on main thread; log lines are appended via Tk.after().
"""

import tkinter as tk
from tkinter import ttk, messagebox
from typing import Callable, Optional

from .config import APP_TITLE, APP_SUBTITLE, ICON_FILE, LOG_MAX_LINES, LINK_OPEN_ERROR
from .models import ClientDraft, Equipment, MutationResult
from .session import DashboardSession
from .utils import (
    get_icon_path,
    open_external_link,
    equipment_label,
    equipment_color,
    equipment_from_label,
    link_icon_hit,
)

BG = "#1e1e1e"
PANEL_BG = "#2b2b2b"
EMPTY_ROW_ID = "__empty__"


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior.
    - Public attributes:
        enable_notifications (tk.BooleanVar): toggles desktop notifications
        show_logs (tk.BooleanVar): toggles visibility of the logs panel
    - Public methods:
        refresh_ui(): repaint stats and table from the registry
        append_log(): thread-safe adapter to append one log line into Logs
    """

    def __init__(self, root: tk.Tk, session: DashboardSession):
        self.root = root
        self.session = session
        self.registry = session.registry

        # UI state variables
        self.enable_notifications = tk.BooleanVar(value=session.notifier.enabled)
        self.show_logs = tk.BooleanVar(value=False)
        self.sort_state = {"column": None, "order": None}

        # Window
        self.root.title(f"{APP_TITLE} - {APP_SUBTITLE}")
        icon = get_icon_path(ICON_FILE)
        if icon:
            self.root.iconbitmap(icon)
        self.root.rowconfigure(0, weight=1)
        self.root.columnconfigure(0, weight=1)
        self.root.configure(bg=BG)

        # Paned window: top = content (header, stats, tree, buttons), bottom = logs (when shown)
        self.paned = ttk.PanedWindow(self.root, orient=tk.VERTICAL)
        self.paned.grid(row=0, column=0, sticky="nsew")

        content_frame = tk.Frame(self.paned, bg=BG)
        content_frame.rowconfigure(2, weight=1)
        content_frame.columnconfigure(0, weight=1)
        self.paned.add(content_frame, weight=1)

        self.bottom_frame = tk.Frame(self.paned, bg=BG)
        self.logs_box = tk.Text(self.bottom_frame, height=6, bg="#1b1b1b", fg="#dddddd", wrap="none")
        self.logs_box.configure(state="disabled")
        self.logs_box.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 6))
        self.logs_box.pack_forget()  # hidden by default
        self.paned.add(self.bottom_frame, weight=0)

        def _keep_sash_collapsed(_event=None):
            """When Logs is unchecked, keep sash at bottom so window can resize down."""
            if not self.show_logs.get():
                self.paned.update_idletasks()
                total = self.paned.winfo_height()
                if total > 0:
                    self.paned.sashpos(0, total)

        self.paned.bind("<Configure>", _keep_sash_collapsed)

        # Style
        style = ttk.Style(self.root)
        style.theme_use("default")
        style.configure(
            "Treeview",
            background=PANEL_BG,
            foreground="#f0f0f0",
            fieldbackground=PANEL_BG,
            rowheight=24,
            font=("Segoe UI", 10),
        )
        style.configure(
            "Treeview.Heading",
            background=BG,
            foreground="#ffffff",
            font=("Segoe UI", 10, "bold"),
        )
        style.map("Treeview", background=[('selected', '#444')], foreground=[])

        # Header
        header = tk.Frame(content_frame, bg=BG)
        header.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 5))
        tk.Label(header, text=APP_TITLE, fg="#FFA500", bg=BG, font=("Segoe UI", 20, "bold")).pack(side=tk.LEFT)
        tk.Label(header, text=APP_SUBTITLE, fg="#cccccc", bg=BG, font=("Segoe UI", 11)).pack(side=tk.LEFT, padx=10)

        # Stats cards
        stats_frame = tk.Frame(content_frame, bg=BG)
        stats_frame.grid(row=1, column=0, sticky="ew", padx=10, pady=5)
        self.total_var = tk.StringVar()
        self.unique_var = tk.StringVar()
        self.distribution_var = tk.StringVar()
        for title, var in (
            ("Total Clients", self.total_var),
            ("Equipment Types", self.unique_var),
            ("Distribution", self.distribution_var),
        ):
            card = tk.Frame(stats_frame, bg=PANEL_BG, padx=12, pady=8)
            card.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 8))
            tk.Label(card, text=title, fg="#aaaaaa", bg=PANEL_BG, font=("Segoe UI", 9, "bold")).pack(anchor="w")
            tk.Label(card, textvariable=var, fg="#ffffff", bg=PANEL_BG, font=("Segoe UI", 14, "bold"),
                     justify=tk.LEFT).pack(anchor="w")

        # Treeview
        self.columns = ("name", "ddns_link", "equipment")
        self.tree = ttk.Treeview(content_frame, columns=self.columns, show="headings", selectmode="browse")
        self.tree.grid(row=2, column=0, sticky="nsew", padx=10, pady=5)

        for equipment in Equipment:
            self.tree.tag_configure(equipment.value, foreground=equipment_color(equipment))
        self.tree.tag_configure("empty", foreground="#888888")

        headers = {"name": "Client", "ddns_link": "DDNS Link", "equipment": "Equipment"}
        for col in self.columns:
            self.tree.heading(col, text=headers[col], command=lambda c=col: self.sort_by_column(c))

        self.tree.bind("<Button-1>", self.on_single_click)
        self.tree.bind("<Double-1>", self.on_double_click)

        # Buttons & toggles
        button_frame = tk.Frame(content_frame, bg=BG)
        button_frame.grid(row=3, column=0, sticky="ew", padx=10, pady=(0, 10))

        ttk.Button(button_frame, text="Add Client", command=self.add_client).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Edit Client", command=self.edit_client).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Delete Client", command=self.delete_client).pack(side=tk.LEFT, padx=5)

        tk.Checkbutton(
            button_frame,
            text="Enable Notifications",
            variable=self.enable_notifications,
            fg="white",
            bg=BG,
            selectcolor=PANEL_BG,
            activebackground=BG,
            activeforeground="white",
            command=self.toggle_notifications,
        ).pack(side=tk.LEFT, padx=5)

        tk.Checkbutton(
            button_frame,
            text="Show Logs",
            variable=self.show_logs,
            fg="white",
            bg=BG,
            selectcolor=PANEL_BG,
            command=self.toggle_logs,
        ).pack(side=tk.LEFT, padx=5)

        # Initial paint
        self.refresh_ui()

    # ---------- Logging hook ----------

    def append_log(self, line: str) -> None:
        """
        Purpose: Sink for LogPanelHandler.
        Thread-safety: Reschedules append on main thread.
        """
        self.root.after(0, lambda: self._append_log(line))

    # ---------- UI callbacks & utilities ----------

    def toggle_notifications(self) -> None:
        self.session.notifier.enabled = self.enable_notifications.get()

    def toggle_logs(self) -> None:
        """Show logs in bottom pane. Resize pane to show/hide."""
        if self.show_logs.get():
            self.paned.pane(self.bottom_frame, weight=1)
            self.logs_box.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 6))
            self.paned.update_idletasks()
            total = self.paned.winfo_height()
            if total > 0:
                self.paned.sashpos(0, int(total * 0.8))
        else:
            self.logs_box.pack_forget()
            self.paned.pane(self.bottom_frame, weight=0)
            self.paned.update_idletasks()
            total = self.paned.winfo_height()
            if total > 0:
                self.paned.sashpos(0, total)

    def refresh_ui(self) -> None:
        """
        Purpose: Rebuild stats and Tree rows from the registry snapshot and apply sorting.
        Side effects: Mutates Treeview items and stat labels (UI only).
        """
        stats = self.registry.statistics()
        self.total_var.set(str(stats.total_clients))
        self.unique_var.set(str(stats.unique_equipments))
        self.distribution_var.set(
            "\n".join(f"{equipment_label(item.equipment)}: {item.count}" for item in stats.equipment_distribution)
            or "—"
        )

        clients = self.registry.snapshot()

        col, order = self.sort_state["column"], self.sort_state["order"]
        if col:
            reverse = (order == "desc")
            if col == "equipment":
                clients.sort(key=lambda c: list(Equipment).index(c.equipment), reverse=reverse)
            else:
                clients.sort(key=lambda c: getattr(c, col).lower(), reverse=reverse)

        self.tree.delete(*self.tree.get_children())
        for client in clients:
            self.tree.insert(
                "",
                "end",
                iid=client.id,
                values=(client.name, f"↗ {client.ddns_link}", equipment_label(client.equipment)),
                tags=(client.equipment.value,),
            )
        if not clients:
            self.tree.insert(
                "", "end", iid=EMPTY_ROW_ID,
                values=("No clients registered", 'Click "Add Client" to get started', ""),
                tags=("empty",),
            )

    def on_single_click(self, event) -> None:
        """
        Purpose: Open the DDNS link when its icon area is clicked.
        Side effects: May open web browser; shows a generic error if that fails.
        """
        region = self.tree.identify("region", event.x, event.y)
        if region != "cell":
            return

        row_id = self.tree.identify_row(event.y)
        col_id = self.tree.identify_column(event.x)
        if not row_id or not col_id or row_id == EMPTY_ROW_ID:
            return

        col_index = int(col_id[1:]) - 1
        if col_index != self.columns.index("ddns_link"):
            return

        if not link_icon_hit(self.tree.bbox(row_id, col_id), event.x):
            return

        client = self.registry.get(row_id)
        if not client:
            return
        if not open_external_link(client.ddns_link):
            messagebox.showerror("Open Link", LINK_OPEN_ERROR)

    def on_double_click(self, event) -> None:
        """Double-clicking a row opens the edit dialog."""
        row_id = self.tree.identify_row(event.y)
        if row_id and row_id != EMPTY_ROW_ID:
            self.tree.selection_set(row_id)
            self.edit_client()

    def sort_by_column(self, col: str) -> None:
        """
        Purpose: Toggle header sort order and refresh. Only the view is sorted.
        Inputs: col (column key from self.columns).
        """
        order = "asc"
        if self.sort_state["column"] == col and self.sort_state["order"] == "asc":
            order = "desc"
        elif self.sort_state["column"] == col and self.sort_state["order"] == "desc":
            col, order = None, None  # reset sort
        self.sort_state["column"] = col
        self.sort_state["order"] = order
        self.refresh_ui()

    def _selected_client_id(self) -> Optional[str]:
        selected = self.tree.selection()
        if not selected or selected[0] == EMPTY_ROW_ID:
            return None
        return selected[0]

    def _append_log(self, text: str) -> None:
        """
        Purpose: Append one line to the Logs panel and trim to LOG_MAX_LINES.
        Thread-safety: Main thread only (called via after()).
        """
        self.logs_box.configure(state="normal")
        self.logs_box.insert("end", text)
        self.logs_box.see("end")
        total_lines = int(self.logs_box.index("end-1c").split(".")[0])
        if total_lines > LOG_MAX_LINES:
            remove = total_lines - LOG_MAX_LINES
            self.logs_box.delete("1.0", f"{remove + 1}.0")
        self.logs_box.configure(state="disabled")

    # ---------- CRUD dialogs ----------

    def _client_form(self, title: str, draft: ClientDraft, submit: Callable[[ClientDraft], MutationResult],
                     on_cancel: Callable[[], None], save_text: str) -> None:
        """
        Purpose: Shared Name / DDNS Link / Equipment dialog for add and edit.
        Inputs: initial draft, submit (session call), on_cancel (session call).
        Side effects: Closes on success; otherwise lists the validation errors in red.
        """
        win = tk.Toplevel(self.root)
        win.title(title)
        win.configure(bg=BG)
        win.transient(self.root)

        errors_var = tk.StringVar()
        tk.Label(win, textvariable=errors_var, fg="#FF6A6A", bg=BG, justify=tk.LEFT).grid(
            row=0, column=0, columnspan=2, sticky="w", padx=5, pady=(5, 0))

        tk.Label(win, text="Client Name *", fg="white", bg=BG).grid(row=1, column=0, sticky="e", padx=5, pady=5)
        e_name = tk.Entry(win, width=32)
        e_name.insert(0, draft.name or "")
        e_name.grid(row=1, column=1, padx=5, pady=5)

        tk.Label(win, text="DDNS Link *", fg="white", bg=BG).grid(row=2, column=0, sticky="e", padx=5, pady=5)
        e_link = tk.Entry(win, width=32)
        e_link.insert(0, draft.ddns_link or "")
        e_link.grid(row=2, column=1, padx=5, pady=5)
        tk.Label(win, text="e.g. client.ddns.net", fg="gray", bg=BG, font=("Segoe UI", 8)).grid(
            row=2, column=2, sticky="w", padx=(0, 5))

        tk.Label(win, text="Equipment *", fg="white", bg=BG).grid(row=3, column=0, sticky="e", padx=5, pady=5)
        current = Equipment.parse(draft.equipment)
        v_equipment = tk.StringVar(value=equipment_label(current) if current else "")
        cb_equipment = ttk.Combobox(win, textvariable=v_equipment, state="readonly",
                                    values=[equipment_label(e) for e in Equipment])
        cb_equipment.grid(row=3, column=1, padx=5, pady=5, sticky="w")

        def save():
            result = submit(ClientDraft(
                name=e_name.get(),
                ddns_link=e_link.get(),
                equipment=equipment_from_label(v_equipment.get()),
            ))
            if result or not result.found:
                win.destroy()
                self.refresh_ui()
                return
            errors_var.set("\n".join(f"• {msg}" for msg in result.errors))

        def cancel():
            on_cancel()
            win.destroy()

        win.protocol("WM_DELETE_WINDOW", cancel)
        buttons = tk.Frame(win, bg=BG)
        buttons.grid(row=4, column=0, columnspan=3, pady=10)
        ttk.Button(buttons, text="Cancel", command=cancel).pack(side=tk.LEFT, padx=5)
        ttk.Button(buttons, text=save_text, command=save).pack(side=tk.LEFT, padx=5)
        e_name.focus_set()

    def add_client(self) -> None:
        """
        Purpose: Open a dialog to add a new client.
        Side effects: Mutates the registry on save.
        """
        self.session.open_add()
        self._client_form("Add New Client", ClientDraft(), self.session.submit_add,
                          self.session.cancel_add, "Add Client")

    def edit_client(self) -> None:
        """
        Purpose: Open a dialog to edit the selected client. The id is kept.
        Side effects: Mutates the registry on save.
        """
        client_id = self._selected_client_id()
        if client_id is None:
            messagebox.showinfo("Edit Client", "Select a client to edit.")
            return
        draft = self.session.open_edit(client_id)
        if draft is None:
            self.refresh_ui()
            return
        self._client_form("Edit Client", draft, self.session.submit_edit,
                          self.session.cancel_edit, "Save Changes")

    def delete_client(self) -> None:
        """
        Purpose: Ask for confirmation, then remove the selected client.
        Side effects: Mutates the registry only after the user confirms.
        """
        client_id = self._selected_client_id()
        if client_id is None:
            messagebox.showinfo("Delete Client", "Select a client to delete.")
            return
        client = self.session.request_delete(client_id)
        if client is None:
            self.refresh_ui()
            return

        confirmed = messagebox.askyesno(
            "Confirm Deletion",
            "This action cannot be undone. The client will be permanently removed.\n\n"
            f"Client to be deleted:\n{client.name}\n{client.ddns_link}",
            icon=messagebox.WARNING,
        )
        if not confirmed:
            self.session.cancel_delete()
            return
        self.session.confirm_delete()
        self.refresh_ui()
