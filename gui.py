import logging
import tkinter as tk
from tkinter import ttk, messagebox
import threading
import time
from typing import Optional

import config
from config import Difficulty, DIFFICULTY_SETTINGS
from game import OthelloGame, IllegalMoveError, opponent
from ai import OthelloAI, difficulty_description
from utils import cell_from_pixel, cell_origin, format_move, now_seconds

logger = logging.getLogger(__name__)


class OthelloGUI:
    def __init__(self, root: tk.Tk, difficulty=config.DEFAULT_DIFFICULTY, human_color=config.BLACK):
        self.root = root
        self.root.title("Othello")

        # Game state
        self.game = OthelloGame()
        self.human_color: int = human_color
        self.ai_color: int = opponent(human_color)
        self.difficulty = Difficulty(difficulty)
        self.game_over = False

        # Threading & AI
        self.ai_thread: Optional[threading.Thread] = None

        canvas_size = config.CELL_SIZE * config.BOARD_SIZE
        pad = config.CANVAS_PADDING

        # Canvas for board
        self.canvas = tk.Canvas(
            root,
            width=canvas_size + 2*pad,
            height=canvas_size + 2*pad,
            bg=config.COLOR_BOARD
        )
        self.canvas.grid(row=0, column=0, columnspan=4, padx=8, pady=8)
        self.canvas.bind('<Button-1>', self.on_canvas_click)

        # Info label
        self.info_label = tk.Label(root, text='', font=('Arial', 11, 'bold'))
        self.info_label.grid(row=1, column=0, columnspan=4, pady=5)

        # Human player options
        human_frame = ttk.LabelFrame(root, text="Human Player", padding=5)
        human_frame.grid(row=2, column=0, columnspan=4, padx=10, pady=5, sticky='ew')
        self.human_player_var = tk.IntVar(value=human_color)
        ttk.Radiobutton(
            human_frame,
            text='Play as Black',
            variable=self.human_player_var,
            value=config.BLACK
        ).pack(side='left', padx=10)
        ttk.Radiobutton(
            human_frame,
            text='Play as White',
            variable=self.human_player_var,
            value=config.WHITE
        ).pack(side='left', padx=10)

        # Difficulty selection
        settings_frame = ttk.LabelFrame(root, text="AI Difficulty", padding=5)
        settings_frame.grid(row=3, column=0, columnspan=4, padx=10, pady=5, sticky='ew')
        self.difficulty_var = tk.StringVar()
        self.difficulty_combo = ttk.Combobox(
            settings_frame,
            textvariable=self.difficulty_var,
            width=50,
            state='readonly',
            values=[DIFFICULTY_SETTINGS[d][2] for d in Difficulty]
        )
        self.difficulty_combo.current(list(Difficulty).index(self.difficulty))
        self.difficulty_combo.bind('<<ComboboxSelected>>', self.on_difficulty_change)
        self.difficulty_combo.grid(row=0, column=0, sticky='w', padx=5)

        self.score_label = tk.Label(settings_frame, text='Black: 2  |  White: 2', font=('Arial', 11, 'bold'))
        self.score_label.grid(row=0, column=1, padx=10)

        # Control buttons
        ttk.Button(
            root, text='Start New Game', command=self.start_new_game
        ).grid(row=4, column=0, sticky='ew', padx=4, pady=5)
        ttk.Button(
            root, text='Quit', command=self.on_quit
        ).grid(row=4, column=1, sticky='ew', padx=4, pady=5)

        # Move log
        log_frame = ttk.LabelFrame(root, text="Game Log", padding=5)
        log_frame.grid(row=5, column=0, columnspan=4, padx=10, pady=5, sticky='nsew')

        self.move_log = tk.Text(log_frame, width=60, height=8, state='disabled', wrap='word')
        self.move_log.pack(side='left', fill='both', expand=True)

        scrollbar = ttk.Scrollbar(log_frame, command=self.move_log.yview)
        scrollbar.pack(side='right', fill='y')
        self.move_log.config(yscrollcommand=scrollbar.set)

        self.start_new_game()

    def _color_to_str(self, color: int) -> str:
        return config.COLOR_NAMES.get(color, "Unknown")

    def on_difficulty_change(self, _event=None):
        self.difficulty = list(Difficulty)[self.difficulty_combo.current()]
        self.append_log(f"AI difficulty: {difficulty_description(self.difficulty)}")

    def start_new_game(self):
        if self.ai_thread and self.ai_thread.is_alive():
            self.append_log("AI is still thinking - try again in a moment")
            return

        self.game = OthelloGame()
        self.game_over = False
        self.human_color = self.human_player_var.get()
        self.ai_color = opponent(self.human_color)

        self.move_log.config(state='normal')
        self.move_log.delete('1.0', 'end')
        self.move_log.config(state='disabled')

        self.append_log("=" * 60)
        self.append_log(f"NEW GAME - Human: {self._color_to_str(self.human_color)}, "
                        f"AI: {self._color_to_str(self.ai_color)}")
        self.append_log(f"AI difficulty: {difficulty_description(self.difficulty)}")
        self.append_log("=" * 60)

        self.update_score()
        self.next_turn()

    def next_turn(self):
        if self.game_over:
            return
        if self.check_game_over():
            return

        if not self.game.has_any_move(self.game.current_player):
            self.append_log(f"{self._color_to_str(self.game.current_player)} has no legal moves - PASS")
            self.game.pass_turn()

        self.update_info_label()
        self.draw_board()

        if self.game.current_player == self.ai_color:
            self.root.after(config.AI_MOVE_DELAY_MS, self.start_ai_move)

    def on_canvas_click(self, event):
        if self.game_over or self.game.current_player != self.human_color:
            return

        move = cell_from_pixel(event.x, event.y)
        if move is None:
            return

        try:
            self.game.make_move(move, self.human_color)
        except IllegalMoveError:
            self.append_log(f"Invalid move: {format_move(move)}")
            return

        self.append_log(f"Human ({self._color_to_str(self.human_color)}) -> {format_move(move)}")
        self.update_score()
        self.next_turn()

    def draw_board(self):
        self.canvas.delete('all')
        size = config.CELL_SIZE
        pad = config.CANVAS_PADDING

        legal_moves = []
        if self.game.current_player == self.human_color and not self.game_over:
            legal_moves = self.game.legal_moves(self.human_color)

        for r in range(config.BOARD_SIZE):
            for c in range(config.BOARD_SIZE):
                x0, y0 = cell_origin(r, c)
                x1, y1 = x0 + size, y0 + size

                fill_color = config.COLOR_BOARD
                if (r, c) in legal_moves:
                    fill_color = config.COLOR_LEGAL_MOVE

                self.canvas.create_rectangle(x0, y0, x1, y1, outline=config.COLOR_GRID, width=2, fill=fill_color)

                piece = self.game.board[r][c]
                if piece != config.EMPTY:
                    color = config.COLOR_BLACK_PIECE if piece == config.BLACK else config.COLOR_WHITE_PIECE
                    self.canvas.create_oval(x0+6, y0+6, x1-6, y1-6, fill=color, outline='black')

        for i in range(config.BOARD_SIZE):
            offset = pad + i * size + size / 2
            self.canvas.create_text(offset, pad/2, text=str(i), fill='white', font=('Arial', 9, 'bold'))
            self.canvas.create_text(pad/2, offset, text=str(i), fill='white', font=('Arial', 9, 'bold'))

    def start_ai_move(self):
        if self.game_over or self.game.current_player != self.ai_color:
            return
        if self.ai_thread and self.ai_thread.is_alive():
            return

        legal = self.game.legal_moves(self.ai_color)
        self.append_log(f"AI {self._color_to_str(self.ai_color)} thinking... ({len(legal)} legal moves)")
        # The worker gets its own snapshot; the live game is only touched on the Tk thread
        snapshot = self.game.copy()
        self.ai_thread = threading.Thread(
            target=self._ai_worker, args=(self.game, snapshot, self.difficulty), daemon=True
        )
        self.ai_thread.start()

    def _ai_worker(self, game, snapshot, difficulty):
        best_move, nodes_info = None, "N/A"
        start_time = now_seconds()

        try:
            agent = OthelloAI(snapshot, self.ai_color, difficulty)
            best_move = agent.get_move()
            nodes_info = agent.nodes_evaluated
        except Exception:
            logger.exception("AI search failed")

        elapsed = now_seconds() - start_time
        self.root.after(10, lambda: self._apply_ai_move(game, best_move, elapsed, nodes_info))

    def _apply_ai_move(self, game, best_move, elapsed, nodes_info):
        # Results searched for a game that has since been replaced are dropped
        if game is not self.game:
            logger.debug("Discarding AI move %s from a previous game", best_move)
            return
        if self.game_over or self.game.current_player != self.ai_color:
            return

        color_name = self._color_to_str(self.ai_color)
        if best_move is None:
            self.append_log(f"AI {color_name} returned no move - start a new game")
            return

        self.game.make_move(best_move, self.ai_color)
        self.append_log(f"AI {color_name} -> {format_move(best_move)} (t={elapsed:.2f}s, n={nodes_info})")
        self.update_score()
        self.next_turn()

    def update_score(self):
        black_count, white_count = self.game.count_discs()
        self.score_label.config(text=f"Black: {black_count}  |  White: {white_count}")

    def check_game_over(self) -> bool:
        if not self.game.is_game_over():
            return False

        self.game_over = True
        self.draw_board()
        black_count, white_count = self.game.count_discs()

        winner = self.game.get_winner()
        winner_color = "Tie" if winner == config.EMPTY else self._color_to_str(winner)

        result_msg = f"GAME OVER!\n\nBlack: {black_count}\nWhite: {white_count}\n\nWinner: {winner_color}"
        self.append_log("=" * 60)
        self.append_log(f"GAME OVER! Winner: {winner_color}")
        self.append_log(f"Final Score - Black: {black_count}, White: {white_count}")
        self.append_log("=" * 60)
        logger.info("Game over: Black %d, White %d (%s)", black_count, white_count, winner_color)

        self.info_label.config(text=f"GAME OVER! Winner: {winner_color}")
        messagebox.showinfo("Game Over", result_msg)
        return True

    def update_info_label(self):
        if self.game_over:
            return

        current_player_str = self._color_to_str(self.game.current_player)
        if self.game.current_player == self.human_color:
            text = f"Your turn ({current_player_str})"
        else:
            text = f"AI's turn ({current_player_str})"
        self.info_label.config(text=text)

    def on_quit(self):
        if messagebox.askokcancel("Quit", "Do you want to quit?"):
            self.root.quit()

    def append_log(self, text: str):
        tstamp = time.strftime('%H:%M:%S')
        self.move_log.config(state='normal')
        self.move_log.insert('end', f"[{tstamp}] {text}\n")
        self.move_log.see('end')
        self.move_log.config(state='disabled')
