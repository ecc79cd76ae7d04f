import sys

from botline import bot

sys.exit(bot.main())
