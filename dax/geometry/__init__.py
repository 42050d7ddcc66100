"""Procedural box and sphere mesh generators."""