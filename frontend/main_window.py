# frontend/main_window.py
import queue
import threading
from typing import Optional

import customtkinter as ctk

from frontend.config import *
from frontend.health_client import HealthClient

POLL_INTERVAL_MS = 100


class DashboardApp(ctk.CTk):
    def __init__(self, client: Optional[HealthClient] = None):
        super().__init__()
        self.title(APP_TITLE)
        self.geometry(WINDOW_SIZE)
        self.configure(fg_color=BG_COLOR)

        self.client = client or HealthClient()
        # Worker threads only put results here; Tk widgets are touched from the Tk loop
        self._results: "queue.Queue[str]" = queue.Queue()
        self._build_ui()
        self.refresh()
        self.after(POLL_INTERVAL_MS, self._poll_results)

    def _build_ui(self):
        container = ctk.CTkFrame(self, fg_color="transparent")
        container.place(relx=0.5, rely=0.5, anchor="center")

        ctk.CTkLabel(
            container,
            text="User Directory Frontend",
            font=(FONT_FAMILY, 24, "bold"),
            text_color=TEXT_COLOR_DARK,
        ).pack(pady=(0, 16))

        row = ctk.CTkFrame(container, fg_color="transparent")
        row.pack()
        ctk.CTkLabel(row, text="Backend Health:", font=(FONT_FAMILY, 16), text_color=TEXT_COLOR_DARK).pack(side="left")
        self.status_label = ctk.CTkLabel(row, text=LOADING_TEXT, font=(FONT_FAMILY, 16, "bold"), text_color=MUTED)
        self.status_label.pack(side="left", padx=(8, 0))

    def refresh(self):
        """Fetch the status off the UI thread."""
        threading.Thread(target=lambda: self._results.put(self.client.fetch_status()), daemon=True).start()

    def _poll_results(self):
        try:
            while True:
                self.show_status(self._results.get_nowait())
        except queue.Empty:
            pass
        self.after(POLL_INTERVAL_MS, self._poll_results)

    def show_status(self, status: str):
        color = DANGER if status == ERROR_TEXT else SUCCESS
        self.status_label.configure(text=status, text_color=color)
