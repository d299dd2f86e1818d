"""JSON Compare Backend - line-level JSON and text comparison"""
