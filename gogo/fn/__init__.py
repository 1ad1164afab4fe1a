"""Callable wrappers with plain and checked forms, conditionals and guards."""