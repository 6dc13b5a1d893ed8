"""Game entry point"""

from circle_shooter.game import Game

Game().run()
