# -*- coding: utf-8 -*-
"""healthtrack: steps and meal logging with history, statistics and goal progress."""
