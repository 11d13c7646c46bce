import logging
import tkinter as tk
from tkinter import ttk
from tkinter.scrolledtext import ScrolledText
from pathlib import Path

from velfi.config import MenuDefinition, load_menu_definition
from velfi.core.backend import BEFORE_CLOSE_EVENT, Backend
from velfi.core.errors import VelfiError
from velfi.core.logger import get_logger
from velfi.services.dialogs.tk_dialogs import TkDialogs


class TkTextHandler(logging.Handler):
    """Logging handler that appends records to a read-only Tkinter Text widget."""

    def __init__(self, text_widget: ScrolledText):
        super().__init__(level=logging.INFO)
        self.text_widget = text_widget
        self.setFormatter(logging.Formatter("%(asctime)s %(message)s", datefmt="%H:%M:%S"))

    def emit(self, record: logging.LogRecord) -> None:
        msg = self.format(record)
        self.text_widget.after(0, self._append, msg + "\n")

    def _append(self, msg: str) -> None:
        self.text_widget.configure(state=tk.NORMAL)
        self.text_widget.insert(tk.END, msg)
        self.text_widget.see(tk.END)
        self.text_widget.configure(state=tk.DISABLED)


class App(tk.Tk):
    def __init__(self, menu: MenuDefinition | None = None):
        super().__init__()
        self.title("velfi")
        self.geometry("1024x768")
        self.configure(background="#1b2636")

        self.logger = get_logger()
        self.dialogs = TkDialogs(self)
        self.backend = Backend(self.dialogs, emit=self._on_event, logger=self.logger)
        self.menu_def = menu or load_menu_definition()

        self.portfolio_path: Path | None = None
        self.dirty = False
        self.docroot = tk.StringVar()
        self.entity_name = tk.StringVar()
        self.docfolder = tk.StringVar()
        self.document = tk.StringVar()
        self.status = tk.StringVar(value="Ready")

        self._handlers = {
            "menu:open": self._on_open,
            "menu:save": self._on_save,
            "menu:saveas": self._on_save_as,
            "menu:quit": self._on_close_request,
            "menu:about": self._on_about,
            BEFORE_CLOSE_EVENT: self._on_before_close,
        }

        self._build_menu()
        self._build_ui()
        self.protocol("WM_DELETE_WINDOW", self._on_close_request)

    def _build_menu(self):
        bar = tk.Menu(self)
        for menu in self.menu_def.menus:
            sub = tk.Menu(bar, tearoff=False)
            for item in menu.items:
                if item.separator:
                    sub.add_separator()
                    continue
                sub.add_command(
                    label=item.label,
                    accelerator=item.tk_accelerator() or "",
                    command=lambda ev=item.event: self.backend.emit(ev),
                )
                binding = item.tk_binding()
                if binding:
                    self.bind_all(binding, lambda _e, ev=item.event: self.backend.emit(ev))
            bar.add_cascade(label=menu.label, menu=sub)
        self.config(menu=bar)

    def _build_ui(self):
        frm_docs = ttk.Labelframe(self, text="Documents")
        frm_docs.pack(fill=tk.X, padx=10, pady=10)
        frm_docs.columnconfigure(1, weight=1)

        ttk.Label(frm_docs, text="Document root:").grid(row=0, column=0, sticky=tk.W, padx=5, pady=3)
        ttk.Entry(frm_docs, textvariable=self.docroot).grid(row=0, column=1, sticky=tk.EW, padx=5)
        ttk.Button(frm_docs, text="Browse...", command=self._choose_docroot).grid(row=0, column=2, padx=5)

        ttk.Label(frm_docs, text="Entity name:").grid(row=1, column=0, sticky=tk.W, padx=5, pady=3)
        ttk.Entry(frm_docs, textvariable=self.entity_name).grid(row=1, column=1, sticky=tk.EW, padx=5)

        ttk.Label(frm_docs, text="Document folder:").grid(row=2, column=0, sticky=tk.W, padx=5, pady=3)
        ttk.Entry(frm_docs, textvariable=self.docfolder).grid(row=2, column=1, sticky=tk.EW, padx=5)
        ttk.Button(frm_docs, text="Choose/Create...", command=self._choose_folder).grid(row=2, column=2, padx=5)

        ttk.Label(frm_docs, text="Document:").grid(row=3, column=0, sticky=tk.W, padx=5, pady=3)
        ttk.Entry(frm_docs, textvariable=self.document).grid(row=3, column=1, sticky=tk.EW, padx=5)
        frm_doc_btn = ttk.Frame(frm_docs)
        frm_doc_btn.grid(row=3, column=2, padx=5)
        ttk.Button(frm_doc_btn, text="Attach...", command=self._attach_document).pack(side=tk.LEFT)
        ttk.Button(frm_doc_btn, text="Open", command=self._open_document).pack(side=tk.LEFT, padx=(5, 0))

        frm_pf = ttk.Labelframe(self, text="Portfolio")
        frm_pf.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 5))
        self.txt_portfolio = ScrolledText(frm_pf, height=16, undo=True)
        self.txt_portfolio.pack(fill=tk.BOTH, expand=True)
        self.txt_portfolio.bind("<<Modified>>", self._on_modified)

        frm_log = ttk.Labelframe(self, text="Log")
        frm_log.pack(fill=tk.X, padx=10, pady=(0, 5))
        self.txt_log = ScrolledText(frm_log, height=8, state=tk.DISABLED)
        self.txt_log.pack(fill=tk.BOTH, expand=True)
        self.logger.addHandler(TkTextHandler(self.txt_log))

        ttk.Label(self, textvariable=self.status).pack(fill=tk.X, padx=10, pady=(0, 8))

    # ------------------------------------------------------------------
    def _guarded(self, title: str, action):
        try:
            return action()
        except (VelfiError, OSError, UnicodeDecodeError) as e:
            self.logger.exception("%s failed", title)
            self.dialogs.show_error(title, str(e))
        return None

    def _on_event(self, event: str):
        handler = self._handlers.get(event)
        if handler is not None:
            self.after(0, handler)

    def _on_modified(self, _event=None):
        if self.txt_portfolio.edit_modified():
            self.dirty = True
            self.txt_portfolio.edit_modified(False)

    def _choose_docroot(self):
        d = self.backend.open_directory_dialog()
        if d:
            self.docroot.set(d)

    def _choose_folder(self):
        result = self._guarded(
            "Document folder",
            lambda: self.backend.choose_or_create_folder(
                self.docroot.get(), self.docfolder.get(), self.entity_name.get()
            ),
        )
        if result is not None:
            self.docfolder.set(result)
            self.status.set(f"Folder: {result or '-'}")

    def _attach_document(self):
        result = self._guarded(
            "Attach document",
            lambda: self.backend.choose_document(self.docroot.get(), self.docfolder.get()),
        )
        if result:
            self.document.set(result)
            self.status.set(f"Document: {result}")

    def _open_document(self):
        stored = self.document.get().strip()
        if not stored:
            return
        target = self.backend.resolve_document(stored, self.docroot.get(), self.docfolder.get())
        self._guarded("Open document", lambda: self.backend.open_external(target))

    # ------------------------------------------------------------------
    def _on_open(self):
        path = self.backend.open_file_dialog()
        if not path:
            return
        content = self._guarded("Open portfolio", lambda: self.backend.read_file(path))
        if content is None:
            return
        self.txt_portfolio.delete("1.0", tk.END)
        self.txt_portfolio.insert("1.0", content)
        self.txt_portfolio.edit_modified(False)
        self.portfolio_path = Path(path)
        self.dirty = False
        self.docroot.set(str(self.portfolio_path.parent))
        self.status.set(f"Opened {path}")

    def _on_save(self):
        if self.portfolio_path is None:
            self._on_save_as()
            return
        self._write(self.portfolio_path)

    def _on_save_as(self):
        path = self.backend.save_file_dialog()
        if path:
            self._write(Path(path))

    def _write(self, path: Path):
        content = self.txt_portfolio.get("1.0", "end-1c")

        def write() -> bool:
            self.backend.write_file(str(path), content)
            return True

        if not self._guarded("Save portfolio", write):
            return
        self.portfolio_path = path
        self.dirty = False
        self.status.set(f"Saved {path}")

    def _on_about(self):
        self.dialogs.show_info("About Velfi", f"velfi {self.backend.get_version()}")

    def _on_close_request(self):
        if not self.backend.before_close():
            self.destroy()

    def _on_before_close(self):
        if not self.dirty or self.backend.confirm_dialog("Quit", "Discard unsaved changes and quit?"):
            self.destroy()
            return
        self.backend.reset_close()


def main():
    app = App()
    app.mainloop()
