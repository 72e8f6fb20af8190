# -*- coding: utf-8 -*-
"""Wizard services: step validation and checkpoint persistence."""
