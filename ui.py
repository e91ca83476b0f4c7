"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board (click a cell to play)
- Current player and move timer
- Scoreboard
- Game mode and difficulty selection
- Undo, new round, theme and sound controls
"""

import tkinter as tk
from tkinter import messagebox, ttk
from typing import Optional

from PIL import ImageTk

from display.board_renderer import BoardRenderer
from display.config import DisplayConfig
from engine.ai_player import Difficulty
from engine.game_state import MoveResult, Player
from session.controller import GameController
from session.players import GameMode


DIFFICULTY_BUTTONS = [
    ("Easy", Difficulty.EASY, "#4ade80"),
    ("Medium", Difficulty.MEDIUM, "#fbbf24"),
    ("Hard", Difficulty.HARD, "#f87171"),
]

MODE_BUTTONS = [
    ("2 Players", GameMode.PVP),
    ("vs Computer", GameMode.PVC),
]


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, controller: Optional[GameController] = None):
        """Initialize the UI."""
        self.controller = controller if controller is not None else GameController()
        self.display_config = DisplayConfig()
        self.renderer = BoardRenderer(self.display_config)

        settings = self.controller.storage.get_settings()
        self.dark_mode = bool(settings.get("dark_mode", False))
        self.sound_enabled = bool(settings.get("sound_enabled", True))

        # Pending after() callbacks
        self.ai_job: Optional[str] = None
        self.timer_job: Optional[str] = None
        self.board_locked = False

        self.controller.on_game_over = self._on_game_over
        self.controller.on_time_up = self._on_time_up

        # Create UI
        self._create_ui()

    # ==================== LAYOUT ====================

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        self.style = ttk.Style()
        self.style.theme_use('clam')

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, padx=(0, 10))

        self.turn_label = ttk.Label(left_frame, text="Enter names and start", style='Status.TLabel')
        self.turn_label.pack(pady=(0, 5))

        size = self.display_config.BOARD_SIZE_PX
        self.board_canvas = tk.Canvas(left_frame, width=size, height=size, highlightthickness=0)
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        self.timer_label = ttk.Label(left_frame, text="Time: -", style='Title.TLabel')
        self.timer_label.pack(pady=5)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=300)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y)

        # Player names
        ttk.Label(right_frame, text="Players", style='Title.TLabel').pack()
        names = self.controller.storage.get_players()
        self.player1_var = tk.StringVar(value=names.get("x", ""))
        self.player2_var = tk.StringVar(value=names.get("o", ""))
        ttk.Entry(right_frame, textvariable=self.player1_var).pack(pady=2)
        self.player2_entry = ttk.Entry(right_frame, textvariable=self.player2_var)
        self.player2_entry.pack(pady=2)

        # Game mode
        mode_frame = ttk.Frame(right_frame)
        mode_frame.pack(pady=5)
        self.mode_buttons = {}
        for text, mode in MODE_BUTTONS:
            btn = tk.Button(mode_frame, text=text, width=10,
                            command=lambda m=mode: self._set_game_mode(m))
            btn.pack(side=tk.LEFT, padx=3)
            self.mode_buttons[mode] = btn

        # Difficulty section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(right_frame, text="Difficulty", style='Title.TLabel').pack()
        diff_frame = ttk.Frame(right_frame)
        diff_frame.pack(pady=5)
        self.difficulty_buttons = {}
        for text, difficulty, color in DIFFICULTY_BUTTONS:
            btn = tk.Button(diff_frame, text=text, width=7,
                            command=lambda d=difficulty: self._set_difficulty(d))
            btn.pack(side=tk.LEFT, padx=3)
            self.difficulty_buttons[difficulty] = (btn, color)

        # Scoreboard
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(right_frame, text="Score", style='Title.TLabel').pack()
        self.score_label = ttk.Label(right_frame, text="")
        self.score_label.pack(pady=5)

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        control_frame = ttk.Frame(right_frame)
        control_frame.pack()
        tk.Button(control_frame, text="Start", width=9, bg='#10b981', fg='white',
                  command=self._start_game).grid(row=0, column=0, padx=3, pady=3)
        tk.Button(control_frame, text="Undo", width=9,
                  command=self._undo).grid(row=0, column=1, padx=3, pady=3)
        tk.Button(control_frame, text="New Round", width=9,
                  command=self._new_round).grid(row=1, column=0, padx=3, pady=3)
        tk.Button(control_frame, text="Reset Score", width=9,
                  command=self._reset_scores).grid(row=1, column=1, padx=3, pady=3)
        self.theme_btn = tk.Button(control_frame, width=9, command=self._toggle_theme)
        self.theme_btn.grid(row=2, column=0, padx=3, pady=3)
        self.sound_btn = tk.Button(control_frame, width=9, command=self._toggle_sound)
        self.sound_btn.grid(row=2, column=1, padx=3, pady=3)

        tk.Button(right_frame, text="Quit", bg='#ef4444', fg='white', width=20,
                  command=self._quit).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

        self._apply_theme()
        self._refresh_selectors()
        self._update_board()
        self._update_scoreboard()

    def _apply_theme(self):
        """Restyle widgets for the current theme."""
        colors = self.display_config.theme(self._theme_name())
        background = '#%02x%02x%02x' % colors["background"]
        foreground = '#%02x%02x%02x' % colors["text"]

        self.root.configure(bg=background)
        self.style.configure('TFrame', background=background)
        self.style.configure('TLabel', background=background, foreground=foreground,
                             font=('Segoe UI', 11))
        self.style.configure('Title.TLabel', font=('Segoe UI', 14, 'bold'))
        self.style.configure('Status.TLabel', font=('Segoe UI', 12, 'bold'))

        self.theme_btn.configure(text="Light" if self.dark_mode else "Dark")
        self.sound_btn.configure(text="Sound: on" if self.sound_enabled else "Sound: off")

    def _refresh_selectors(self):
        """Highlight the selected mode and difficulty."""
        players = self.controller.players
        for mode, btn in self.mode_buttons.items():
            selected = mode == players.get_game_mode()
            btn.configure(bg='#6366f1' if selected else '#2d3748', fg='white')

        for difficulty, (btn, color) in self.difficulty_buttons.items():
            if difficulty == players.get_ai_difficulty():
                btn.configure(bg=color, fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

        vs_computer = players.get_game_mode() == GameMode.PVC
        self.player2_entry.configure(state='disabled' if vs_computer else 'normal')

    def _theme_name(self) -> str:
        return "dark" if self.dark_mode else "light"

    # ==================== DISPLAY UPDATES ====================

    def _update_board(self):
        """Redraw the board image."""
        state = self.controller.board.get_state()
        image = self.renderer.render(state.board, state.win_pattern, self._theme_name())
        photo = ImageTk.PhotoImage(image)

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        self.turn_label.configure(text=self.controller.describe_status())

    def _update_scoreboard(self):
        players = self.controller.players.get_players()
        scores = self.controller.players.get_scores()
        self.score_label.configure(
            text=f"{players[Player.X].name}: {scores.x}   "
                 f"{players[Player.O].name}: {scores.o}   Draws: {scores.draw}"
        )

    def _update_timer_label(self):
        timer = self.controller.timer
        if timer.is_running:
            self.timer_label.configure(text=f"Time: {timer.time_left}")
        else:
            self.timer_label.configure(text="Time: -")

    def _play_sound(self, name: str):
        """Beep for the given event (the Tk bell is the only sound we have)."""
        if not self.sound_enabled:
            return
        count = 2 if name in ("win", "lose") else 1
        for _ in range(count):
            self.root.bell()

    # ==================== GAME ACTIONS ====================

    def _start_game(self):
        """Start a game with the entered names."""
        self._cancel_jobs()
        self.controller.start_game(
            player1_name=self.player1_var.get().strip() or None,
            player2_name=self.player2_var.get().strip() or None
        )
        self._after_state_change()
        self._play_sound("click")
        self._schedule_timer()
        self._schedule_ai_turn()

    def _new_round(self):
        self._cancel_jobs()
        self.controller.new_round()
        self._after_state_change()
        self._schedule_timer()
        self._schedule_ai_turn()

    def _on_board_click(self, event):
        """Play the clicked cell."""
        if self.board_locked:
            return
        index = self.renderer.cell_at(event.x, event.y)
        if index is None:
            return

        result = self.controller.play_cell(index)
        if not result.valid:
            print(f"Rejected move: {result.error_message}")
            return

        self._play_sound("click")
        self._update_board()
        self._schedule_ai_turn()

    def _schedule_ai_turn(self):
        """Let the computer move after a short 'thinking' pause."""
        if not self.controller.is_ai_turn():
            self.board_locked = False
            return
        self.board_locked = True
        self.turn_label.configure(text="Computer is thinking...")
        self.ai_job = self.root.after(self.display_config.AI_DELAY_MS, self._ai_move)

    def _ai_move(self):
        """Computer's move (runs on the UI thread)."""
        self.ai_job = None
        try:
            result = self.controller.play_ai_turn()
            if result is not None:
                self._play_sound("click")
        except Exception as e:
            self.turn_label.configure(text=f"ERROR: {str(e)[:30]}")
            print(f"AI move error: {e}")
        self.board_locked = False
        self._update_board()

    def _undo(self):
        self._cancel_ai_job()
        result = self.controller.undo()
        if result is None:
            messagebox.showinfo("Undo", "Nothing to undo!")
            return
        self._play_sound("click")
        self._after_state_change()
        self._schedule_timer()

    def _reset_scores(self):
        self.controller.reset_scores()
        self._update_scoreboard()

    def _set_game_mode(self, mode: GameMode):
        self.controller.players.set_game_mode(mode)
        self._refresh_selectors()
        self._after_state_change()
        self._schedule_ai_turn()
        print(f"Game mode set to: {mode.value}")

    def _set_difficulty(self, difficulty: Difficulty):
        """Set the AI difficulty level."""
        self.controller.players.set_ai_difficulty(difficulty)
        self._refresh_selectors()
        print(f"Difficulty set to: {difficulty.value}")

    def _toggle_theme(self):
        self.dark_mode = not self.dark_mode
        self._save_ui_settings()
        self._apply_theme()
        self._update_board()

    def _toggle_sound(self):
        self.sound_enabled = not self.sound_enabled
        self._save_ui_settings()
        self._apply_theme()

    def _save_ui_settings(self):
        settings = self.controller.storage.get_settings()
        settings["dark_mode"] = self.dark_mode
        settings["sound_enabled"] = self.sound_enabled
        self.controller.storage.save_settings(settings)

    def _after_state_change(self):
        self.board_locked = False
        self._update_board()
        self._update_scoreboard()
        self._update_timer_label()

    # ==================== CALLBACKS ====================

    def _on_game_over(self, result: MoveResult):
        """Announce the result after a short pause."""
        self._update_board()
        self._update_scoreboard()
        self._update_timer_label()
        self.root.after(self.display_config.GAME_OVER_DELAY_MS,
                        lambda: self._announce_result(result))

    def _announce_result(self, result: MoveResult):
        if result.is_draw:
            self._play_sound("draw")
        else:
            winner = self.controller.players.get_current_player(result.winner)
            self._play_sound("lose" if winner.is_ai else "win")
        messagebox.showinfo("Game over", self.controller.describe_status())

    def _on_time_up(self, mark: Player, result: MoveResult):
        name = self.controller.players.get_current_player(mark).name
        self.turn_label.configure(text=f"Time's up! Random move for {name}")
        self._update_board()
        self._schedule_ai_turn()

    # ==================== TIMER ====================

    def _schedule_timer(self):
        if self.timer_job is None:
            self.timer_job = self.root.after(self.display_config.TIMER_TICK_MS, self._timer_tick)
        self._update_timer_label()

    def _timer_tick(self):
        """Advance the move timer by one second."""
        self.timer_job = None
        timer = self.controller.timer
        if timer.is_running and not self.board_locked:
            timer.tick()
            if timer.is_warning:
                self._play_sound("tick")
        self._update_timer_label()
        self.timer_job = self.root.after(self.display_config.TIMER_TICK_MS, self._timer_tick)

    def _cancel_ai_job(self):
        if self.ai_job is not None:
            self.root.after_cancel(self.ai_job)
            self.ai_job = None
        self.board_locked = False

    def _cancel_jobs(self):
        self._cancel_ai_job()
        if self.timer_job is not None:
            self.root.after_cancel(self.timer_job)
            self.timer_job = None

    # ==================== LIFECYCLE ====================

    def offer_saved_session(self):
        """Ask whether to continue the saved game, if there is one."""
        if not self.controller.has_saved_session():
            return
        if messagebox.askyesno("TicTacToe", "Do you want to continue your saved game?"):
            if self.controller.load_saved_session():
                self._refresh_selectors()
                self._after_state_change()
                self._schedule_timer()
                self._schedule_ai_turn()
        else:
            self.controller.discard_saved_session()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_jobs()
        self.controller.save_session()

        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.after(500, self.offer_saved_session)
        self.root.mainloop()
