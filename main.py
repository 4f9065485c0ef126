"""
Worm Game - Main Entry Point
Run this file to configure and start the game
"""

import sys
import os

from worm.manual_play import TICK_MS, play_game
from worm.renderer import CELL_SIZE
from worm.state import GRID_WIDTH, GRID_HEIGHT


def clear_screen():
    """Clear the terminal screen"""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_banner():
    """Print the game banner"""
    print("\n" + "="*60)
    print("  🪱  WORM  🪱")
    print("="*60)


def print_menu():
    """Print the main menu"""
    print("\nChoose an option:")
    print("  1. 🎮 Play")
    print("  2. 🚪 Exit")
    print()


def ask_int(prompt, default, minimum=1):
    """Ask for an integer, falling back to the default on empty or invalid input"""
    raw = input(f"{prompt} [{default}]: ").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        print(f"Invalid input. Using default {default}.")
        return default
    if value < minimum:
        print(f"Value must be at least {minimum}. Using default {default}.")
        return default
    return value


def get_config():
    """
    Get game configuration from the user

    Returns:
        dict: Configuration dictionary with keys: grid_width, grid_height, tick_ms, cell_size
    """
    print("\n" + "="*60)
    print("Configuration")
    print("="*60)
    print("Press Enter to use default values shown in [brackets]\n")

    config = {
        'grid_width': ask_int("Grid width", GRID_WIDTH),
        # the worm starts as a vertical pair of cells
        'grid_height': ask_int("Grid height", GRID_HEIGHT, minimum=2),
        'tick_ms': ask_int("Milliseconds per move", TICK_MS),
        'cell_size': ask_int("Cell size in pixels", CELL_SIZE),
    }
    if config['grid_width'] * config['grid_height'] < 3:
        print("Grid too small for the worm and its food. Using default grid.")
        config['grid_width'], config['grid_height'] = GRID_WIDTH, GRID_HEIGHT

    print("\n" + "="*60)
    print("Configuration Summary:")
    print("="*60)
    print(f"  Grid Size: {config['grid_width']}x{config['grid_height']}")
    print(f"  Speed: one move every {config['tick_ms']} ms")
    print(f"  Window: {config['grid_width'] * config['cell_size']}x{config['grid_height'] * config['cell_size']}")
    print("="*60 + "\n")

    return config


def play():
    """Launch the game"""
    config = get_config()

    print("\n" + "="*60)
    print("Controls:")
    print("  Arrow Keys - Steer the worm")
    print("  ESC - Exit")
    print("="*60 + "\n")

    try:
        play_game(**config)
    except Exception as e:
        print(f"❌ Error during play: {e}")
        input("\nPress Enter to return to menu...")


def main():
    """Main menu loop"""
    while True:
        clear_screen()
        print_banner()
        print_menu()

        choice = input("Enter your choice (1-2): ").strip()

        if choice == '1':
            play()
        elif choice == '2':
            print("\n👋 Thanks for playing! Goodbye!\n")
            sys.exit(0)
        else:
            print("\n❌ Invalid choice. Please enter 1-2.")
            input("Press Enter to continue...")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\n👋 Interrupted by user. Goodbye!\n")
        sys.exit(0)
