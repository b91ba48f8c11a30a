from sqlalchemy import BigInteger, Integer
from sqlalchemy.dialects import mysql

# Surrogate keys: unsigned BIGINT on MySQL, BIGINT elsewhere.
# SQLite only auto-increments a column declared exactly INTEGER PRIMARY KEY.
UnsignedBigInt = (
    BigInteger()
    .with_variant(mysql.BIGINT(unsigned=True), "mysql")
    .with_variant(Integer(), "sqlite")
)
