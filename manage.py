"""
This is the main file to run the game.
It imports the main function from the paddle_shooter package and runs it.
"""

from paddle_shooter.app import main

if __name__ == "__main__":
    main()
