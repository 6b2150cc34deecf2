# -*- coding: utf-8 -*-
"""Daily step entries and the step goal."""
