import logging
import os
import queue
import sys
import threading
import tkinter as tk
from tkinter import ttk, filedialog, messagebox

import config
from controllers.converter_controller import ConverterController
from services.spreadsheet_service import SpreadsheetService
from ui.preview_view import PreviewView
from ui.table_view import TableView

LOGGER = logging.getLogger(__name__)

POLL_MS = 50


class MainWindow:
    def __init__(self, controller: ConverterController | None = None):
        self.controller = controller or ConverterController()
        self._results: "queue.Queue[tuple]" = queue.Queue()

        self.window = tk.Tk()
        self.window.title(config.WINDOW_TITLE)
        self.window.geometry("1200x850")
        self.window.protocol("WM_DELETE_WINDOW", self.on_closing)

        self.toolbar = ttk.Frame(self.window, relief=tk.RAISED, borderwidth=1)
        self.toolbar.pack(side="top", fill="x")
        ttk.Button(self.toolbar, text="📂 Abrir Excel", command=self.open_file_action).pack(side="left", padx=5, pady=5)
        self.btn_export = ttk.Button(self.toolbar, text="💾 Exportar a TXT", command=self.export_action, state="disabled")
        self.btn_export.pack(side="left", padx=5, pady=5)
        ttk.Separator(self.toolbar, orient="vertical").pack(side="left", fill="y", padx=10, pady=5)
        self.lbl_file = ttk.Label(self.toolbar, text="Ningún archivo seleccionado", font=("Arial", 9, "italic"))
        self.lbl_file.pack(side="left", pady=5)

        self.status_frame = ttk.Frame(self.window, relief=tk.SUNKEN, padding=(5, 2))
        self.status_frame.pack(side="bottom", fill="x")
        self.lbl_status = ttk.Label(self.status_frame, text="Listo", anchor="w")
        self.lbl_status.pack(side="left", fill="x")
        self.progress = ttk.Progressbar(self.status_frame, mode='indeterminate', length=200)

        panes = ttk.PanedWindow(self.window, orient="vertical")
        panes.pack(fill="both", expand=True, padx=10, pady=(5, 0))
        self.table = TableView(panes, on_edit=self.on_cell_edit, pixels_per_char=config.PIXELS_PER_CHAR)
        self.preview = PreviewView(panes)
        panes.add(self.table, weight=3)
        panes.add(self.preview, weight=2)

    def run(self):
        self.window.mainloop()

    def run_task(self, description, func):
        self.window.config(cursor="watch")
        self.lbl_status.config(text=f"⏳ {description}...")
        self.progress.pack(side="right", padx=10)
        self.progress.start(10)
        self.window.update()
        try:
            func()
            self.lbl_status.config(text="✅ Listo")
        except Exception as e:
            LOGGER.error("%s: %s", description, e)
            self.lbl_status.config(text="❌ Error")
            messagebox.showerror("Error", str(e))
        finally:
            self.progress.stop()
            self.progress.pack_forget()
            self.window.config(cursor="")

    # =========================================================================
    #  CARGA (lectura de bytes en segundo plano, parseo en el hilo de la UI)
    # =========================================================================
    def open_file_action(self):
        path = filedialog.askopenfilename(filetypes=[("Excel", "*.xlsx *.xls")])
        if not path: return
        token = self.controller.begin_load(path)
        self.lbl_status.config(text=f"⏳ Leyendo {os.path.basename(path)}...")
        threading.Thread(target=self._read_worker, args=(token, path), daemon=True).start()
        self.window.after(POLL_MS, self._poll_results)

    def _read_worker(self, token, path):
        try:
            self._results.put((token, path, SpreadsheetService.read_bytes(path), None))
        except Exception as e:
            self._results.put((token, path, None, e))

    def _poll_results(self):
        try:
            token, path, data, error = self._results.get_nowait()
        except queue.Empty:
            self.window.after(POLL_MS, self._poll_results)
            return
        if not self.controller.is_current(token):
            LOGGER.debug("Lectura obsoleta descartada: %s", path)
            return
        if error is not None:
            self.lbl_status.config(text="❌ Error")
            messagebox.showerror("Error", str(error))
            return
        self.run_task("Procesando libro", lambda: self._apply_load(token, data, path))

    def _apply_load(self, token, data, path):
        if not self.controller.finish_load(token, data, path): return
        self.lbl_file.config(text=self.controller.source_name or "")
        self.btn_export.config(state="normal" if self.controller.can_export else "disabled")
        self.table.show_model(self.controller.model)
        self.preview.update_text(self.controller.preview_text())

    # =========================================================================
    #  EDICIÓN Y EXPORTACIÓN
    # =========================================================================
    def on_cell_edit(self, row_index, col_index, value):
        model = self.controller.edit_cell(row_index, col_index, value)
        self.table.refresh_widths(model)
        self.preview.update_text(self.controller.preview_text())

    def export_action(self):
        if not self.controller.can_export: return
        default = self.controller.export_path
        path = filedialog.asksaveasfilename(
            initialdir=os.path.dirname(os.path.abspath(default)),
            initialfile=os.path.basename(default),
            defaultextension=".txt",
            filetypes=[("Texto", "*.txt")],
        )
        if not path: return

        def _do_export():
            written = self.controller.export_txt(path)
            if written: messagebox.showinfo("Éxito", f"Archivo exportado:\n{written}")
        self.run_task("Exportando TXT", _do_export)

    def on_closing(self):
        if messagebox.askokcancel("Salir", "¿Seguro que quieres salir?"):
            self.window.destroy()
            sys.exit(0)
