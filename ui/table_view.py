import tkinter as tk
from tkinter import ttk

MIN_COLUMN_PX = 60


class TableView(ttk.Frame):
    """
    Grilla editable: la fila 0 del modelo va en los encabezados y el resto en
    el cuerpo. on_edit recibe (row_index, col_index, value) con índices del modelo.
    """

    def __init__(self, parent, on_edit=None, pixels_per_char=8, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.on_edit = on_edit
        self.pixels_per_char = pixels_per_char
        control_frame = ttk.Frame(self)
        control_frame.pack(fill="x", pady=(0, 5))
        ttk.Label(control_frame, text="Buscar:").pack(side="left", padx=(0, 5))
        self.search_var = tk.StringVar()
        self.search_entry = ttk.Entry(control_frame, textvariable=self.search_var, width=30)
        self.search_entry.pack(side="left", padx=(0, 10))
        self.search_entry.bind("<KeyRelease>", self._on_search)
        self.clear_search_btn = ttk.Button(control_frame, text="Limpiar", command=self._clear_search)
        self.clear_search_btn.pack(side="left")
        self.status_label = ttk.Label(control_frame, text="")
        self.status_label.pack(side="right")
        tree_frame = ttk.Frame(self)
        tree_frame.pack(fill="both", expand=True)
        self._tree = ttk.Treeview(tree_frame, show="headings")
        self._tree.pack(side="left", fill="both", expand=True)
        self._scroll_y = ttk.Scrollbar(tree_frame, orient="vertical", command=self._tree.yview)
        self._scroll_y.pack(side="right", fill="y")
        self._tree.configure(yscrollcommand=self._scroll_y.set)
        self._scroll_x = ttk.Scrollbar(self, orient="horizontal", command=self._tree.xview)
        self._scroll_x.pack(side="bottom", fill="x")
        self._tree.configure(xscrollcommand=self._scroll_x.set)
        self._tree.bind("<Double-1>", self._begin_edit)
        self._editor = None
        self._model = None

    # --- Filtro ---
    def _on_search(self, event=None):
        self._display_rows()

    def _clear_search(self):
        self.search_var.set("")
        self._display_rows()

    def _matching_rows(self):
        body = list(enumerate(self._model.body, start=1)) if self._model else []
        term = self.search_var.get().lower()
        if not term:
            return body
        return [(i, row) for i, row in body if any(term in cell.lower() for cell in row)]

    # --- Render ---
    def clear(self):
        self._close_editor()
        for r in self._tree.get_children(): self._tree.delete(r)
        self._tree["columns"] = ()

    def show_model(self, model):
        """Dibuja el modelo completo (nueva carga)."""
        self._model = model
        self._display_rows()

    def refresh_widths(self, model):
        """Tras una edición: actualiza anchos mínimos sin reconstruir las filas."""
        self._model = model
        for col, width in enumerate(model.widths):
            self._tree.column(f"c{col}", minwidth=self._column_px(width))

    def _column_px(self, width):
        return max(width * self.pixels_per_char, MIN_COLUMN_PX)

    def _display_rows(self):
        self.clear()
        model = self._model
        if model is None or model.is_empty: return
        columns = [f"c{i}" for i in range(model.column_count)]
        self._tree["columns"] = tuple(columns)
        for col, (cid, header) in enumerate(zip(columns, model.header)):
            px = self._column_px(model.widths[col])
            self._tree.heading(cid, text=header)
            self._tree.column(cid, anchor="w", width=max(px, 120), minwidth=px, stretch=False)
        rows = self._matching_rows()
        for index, row in rows:
            safe = [row[i] if i < len(row) else "" for i in range(model.column_count)]
            self._tree.insert("", "end", iid=str(index), values=tuple(safe))
        total = model.row_count - 1
        if len(rows) == total:
            self.status_label.config(text=f"Total: {total} registros")
        else:
            self.status_label.config(text=f"Mostrando {len(rows)} de {total} registros")

    # --- Edición en sitio ---
    def _begin_edit(self, event):
        if self._tree.identify_region(event.x, event.y) != "cell": return
        iid = self._tree.identify_row(event.y)
        column = self._tree.identify_column(event.x)
        if not iid or not column: return
        bbox = self._tree.bbox(iid, column)
        if not bbox: return
        self._close_editor()

        row_index = int(iid)
        col_index = int(column.lstrip("#")) - 1
        x, y, w, h = bbox
        var = tk.StringVar(value=self._tree.set(iid, column))
        entry = ttk.Entry(self._tree, textvariable=var)
        entry.place(x=x, y=y, width=w, height=h)
        entry.focus_set()
        entry.select_range(0, "end")

        def commit(event=None):
            value = var.get()
            self._tree.set(iid, column, value)
            if self.on_edit:
                self.on_edit(row_index, col_index, value)

        # Cada tecla se aplica al modelo (vista previa en vivo)
        entry.bind("<KeyRelease>", commit)
        entry.bind("<Return>", lambda e: self._close_editor())
        entry.bind("<FocusOut>", lambda e: self._close_editor())
        self._editor = entry

    def _close_editor(self):
        if self._editor is not None:
            self._editor.destroy()
            self._editor = None
