"""
Reserved SQL words recognized by the keyword rule.

Compound phrases such as "GROUP BY" are single entries and are
matched as one keyword span.
"""

from __future__ import annotations

KEYWORDS: tuple[str, ...] = (
    'ADD',
    'ADD CONSTRAINT',
    'ALTER',
    'ALTER COLUMN',
    'ALTER TABLE',
    'ALL',
    'AND',
    'ANY',
    'AS',
    'ASC',
    'BACKUP DATABASE',
    'BETWEEN',
    'CASE',
    'CHECK',
    'COLUMN',
    'CONSTRAINT',
    'CREATE',
    'CREATE DATABASE',
    'CREATE INDEX',
    'CREATE OR REPLACE VIEW',
    'CREATE TABLE',
    'CREATE PROCEDURE',
    'CREATE UNIQUE INDEX',
    'CREATE VIEW',
    'DATABASE',
    'DEFAULT',
    'DELETE',
    'DESC',
    'DISTINCT',
    'DROP',
    'DROP COLUMN',
    'DROP CONSTRAINT',
    'DROP DATABASE',
    'DROP DEFAULT',
    'DROP INDEX',
    'DROP TABLE',
    'DROP VIEW',
    'EXEC',
    'EXISTS',
    'FOREIGN KEY',
    'FROM',
    'FULL OUTER JOIN',
    'GROUP BY',
    'HAVING',
    'IN',
    'INDEX',
    'INNER JOIN',
    'INSERT INTO',
    'INSERT INTO SELECT',
    'IS NULL',
    'IS NOT NULL',
    'JOIN',
    'LEFT JOIN',
    'LIKE',
    'LIMIT',
    'NOT',
    'NOT NULL',
    'OR',
    'ORDER BY',
    'OUTER JOIN',
    'PRIMARY KEY',
    'PROCEDURE',
    'RIGHT JOIN',
    'ROWNUM',
    'SELECT',
    'SELECT DISTINCT',
    'SELECT INTO',
    'SELECT TOP',
    'SET',
    'TABLE',
    'TOP',
    'TRUNCATE TABLE',
    'UNION',
    'UNION ALL',
    'UNIQUE',
    'UPDATE',
    'VALUES',
    'VIEW',
    'WHERE',
    'PRAGMA',
    'INTEGER',
    'PRIMARY',
    'CHAR',
    'DATETIME',
    'DECIMAL',
    'BINARY',
    'TIMESTAMP',
    'VARCHAR',
    'VARBINARY',
    'TINYBLOB',
    'TINYTEXT',
    'BLOB',
    'LONGTEXT',
    'NULL',
    'REFERENCES',
    'INDEX_LIST',
    'BY',
    'CURRENT_DATE',
    'CURRENT_TIME',
    'EACH',
    'ELSE',
    'ELSEIF',
    'FALSE',
    'FOR',
    'GROUP',
    'IF',
    'IFNULL',
    'INSERT',
    'INTERVAL',
    'INTO',
    'IS',
    'KEY',
    'KEYS',
    'LEFT',
    'MATCH',
    'ON',
    'OPTION',
    'ORDER',
    'OUT',
    'OUTER',
    'REPLACE',
    'TINYINT',
    'RIGHT',
    'LEADING',
    'TRAILING',
    'THEN',
    'TO',
    'TRUE',
    'WHEN',
    'WITH',
    'UNSIGNED',
    'CASCADE',
    'ENGINE',
    'TEXT',
    'AUTO_INCREMENT',
    'SHOW',
    'BEGIN',
    'END',
    'PRINT',
    'OVERLAPS',
)

KEYWORD_SET: frozenset[str] = frozenset(KEYWORDS)


def is_keyword(word: str) -> bool:
    """Check whether a word or phrase is a reserved keyword (case-insensitive)."""
    return ' '.join(word.split()).upper() in KEYWORD_SET


def keywords_by_length() -> list[str]:
    """
    Get the keywords ordered longest first.

    Regex alternation takes the first alternative that matches, so
    longer phrases must come before their own prefixes ("GROUP BY"
    before "GROUP").
    """
    return sorted(KEYWORDS, key=len, reverse=True)
