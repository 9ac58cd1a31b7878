# run_dashboard.py
import os

import customtkinter as ctk

from frontend.main_window import DashboardApp

if os.environ.get('DISPLAY', '') == '':
    print('No display found. Using :0.0')
    os.environ.__setitem__('DISPLAY', ':0.0')

if __name__ == "__main__":
    ctk.set_appearance_mode("light")
    app = DashboardApp()
    app.mainloop()
