from bson.objectid import ObjectId
from fastapi import HTTPException, status
from app.db.posts import PostDBManager

dbm = PostDBManager()


def _notFound():
    return HTTPException(status.HTTP_404_NOT_FOUND, detail="Post not found")


def getPosts():
    return dbm.get()


def getPost(post_id):
    post = dbm.get_single(post_id)
    if post is None:
        raise _notFound()
    return post


def createPost(post):
    return dbm.create(post)


def updatePost(post_id, fields):
    body_id = fields.pop("id", None)
    if body_id is not None and ObjectId(body_id) != ObjectId(post_id):
        raise ValueError(f"Request path id ({post_id}) and request body id ({body_id}) must match")
    post = dbm.update(post_id, fields)
    if post is None:
        raise _notFound()
    return post


def deletePost(post_id):
    if not dbm.delete(post_id):
        raise _notFound()
