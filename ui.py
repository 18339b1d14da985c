"""
TicTacToe UI
A graphical interface for the TicTacToe game using Tkinter.

Shows:
- The board, drawn with Pillow (click a cell to play)
- Game status and whose turn it is
- Mode selection (2 players / vs computer)
- Which mark the computer plays
- Reset and Restart & Swap buttons
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional
from PIL import ImageTk

# Logic imports
from logic.config import GameConfig
from logic.game_state import GameMode, Mark
from logic.game_session import GameEvent, GameSession
from logic.scheduler import TkScheduler

# View imports
from view.config import ViewConfig
from view.board_renderer import BoardRenderer


class TicTacToeUI:
    """
    Main UI class. Renders whatever the session reports and forwards
    clicks and button presses to it.
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        view_config: Optional[ViewConfig] = None
    ):
        """Initialize the UI."""
        self.game_config = game_config or GameConfig()
        self.view_config = view_config or ViewConfig()
        self.renderer = BoardRenderer(self.view_config)

        # Create UI first: the scheduler needs the Tk root
        self._create_ui()

        self.session = GameSession(
            config=self.game_config,
            scheduler=TkScheduler(self.root)
        )
        self.session.subscribe(self._on_session_event)

        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.view_config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.WINDOW_BG)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.WINDOW_BG)
        style.configure('TLabel', background=cfg.WINDOW_BG, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=cfg.TITLE_FONT, foreground='#00d4ff')
        style.configure('Status.TLabel', font=cfg.STATUS_FONT, foreground='#ffd700')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 5))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Mode buttons
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)

        self.mode_buttons = {}
        for text, mode in (("2 Players", GameMode.PLAYER_VS_PLAYER), ("vs AI", GameMode.PLAYER_VS_COMPUTER)):
            btn = tk.Button(
                mode_frame,
                text=text,
                font=cfg.BUTTON_FONT,
                width=10,
                command=lambda m=mode: self.session.set_mode(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = btn

        # Computer side buttons (only meaningful against the computer)
        self.side_frame = ttk.Frame(main_frame)
        self.side_frame.pack(pady=5)
        ttk.Label(self.side_frame, text="AI plays: ").pack(side=tk.LEFT)

        self.side_buttons = {}
        for mark in (Mark.X, Mark.O):
            btn = tk.Button(
                self.side_frame,
                text=mark.value,
                font=cfg.BUTTON_FONT,
                width=3,
                command=lambda m=mark: self.session.set_computer_mark(m)
            )
            btn.pack(side=tk.LEFT, padx=3)
            self.side_buttons[mark] = btn

        # Board canvas
        size = self.renderer.size
        self.board_canvas = tk.Canvas(
            main_frame,
            width=size,
            height=size,
            bg=cfg.WINDOW_BG,
            highlightthickness=0
        )
        self.board_canvas.pack(pady=10)
        self.board_canvas.bind("<Button-1>", self._on_click)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="Reset",
            font=cfg.BUTTON_FONT,
            bg='#6366f1',
            fg='white',
            width=14,
            command=lambda: self.session.reset()
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Restart & Swap",
            font=cfg.BUTTON_FONT,
            bg='#10b981',
            fg='white',
            width=14,
            command=lambda: self.session.restart_and_swap()
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Forward a board click to the session."""
        index = self.renderer.hit_test(event.x, event.y)
        if index is not None:
            self.session.request_move(index)

    def _on_session_event(self, session: GameSession, event: GameEvent):
        self._refresh()

    def _refresh(self):
        """Redraw the board and update labels and buttons."""
        session = self.session

        image = self.renderer.render(session.get_board(), session.winning_line())
        photo = ImageTk.PhotoImage(image)
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        message = session.status_message()
        if session.has_pending_computer_move():
            message += " (thinking...)"
        self.status_label.configure(text=message)

        for mode, btn in self.mode_buttons.items():
            active = mode == session.mode
            btn.configure(bg='#00d4ff' if active else '#2d3748', fg='black' if active else 'white')

        vs_computer = session.mode == GameMode.PLAYER_VS_COMPUTER
        for mark, btn in self.side_buttons.items():
            active = mark == session.computer_mark
            btn.configure(
                state='normal' if vs_computer else 'disabled',
                bg='#fbbf24' if active else '#2d3748',
                fg='black' if active else 'white'
            )

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
