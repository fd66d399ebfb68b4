import tkinter as tk
from tkinter import ttk


class PreviewView(ttk.LabelFrame):
    """Texto de solo lectura con la salida de ancho fijo."""

    def __init__(self, parent, title="Vista previa del TXT", *args, **kwargs):
        super().__init__(parent, text=title, *args, **kwargs)
        self._text = tk.Text(self, wrap="none", font=("Courier New", 10), height=12, state="disabled")
        self._scroll_y = ttk.Scrollbar(self, orient="vertical", command=self._text.yview)
        self._scroll_x = ttk.Scrollbar(self, orient="horizontal", command=self._text.xview)
        self._text.configure(yscrollcommand=self._scroll_y.set, xscrollcommand=self._scroll_x.set)
        self._scroll_x.pack(side="bottom", fill="x")
        self._scroll_y.pack(side="right", fill="y")
        self._text.pack(side="left", fill="both", expand=True)

    def update_text(self, content):
        self._text.configure(state="normal")
        self._text.delete("1.0", "end")
        self._text.insert("1.0", content or "")
        self._text.configure(state="disabled")

    def get_text(self):
        return self._text.get("1.0", "end-1c")
