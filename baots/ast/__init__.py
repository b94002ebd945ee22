"""Builders for TypeScript syntax: imports, exports, consts, functions, types, objects and method chains."""