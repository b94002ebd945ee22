"""Generated files of a TypeScript CLI project, each with its path, content and write rules."""