"""Django project package for yesnoCharts."""
