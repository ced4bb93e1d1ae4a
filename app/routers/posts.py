from fastapi import APIRouter, Response, status
from app.controller.post_controller import getPosts, getPost, createPost, updatePost, deletePost
from app.routers.schema import PostBody, PostUpdateBody
from app.utils.json_encoder import JSONEncoder
import json

router = APIRouter()


@router.get("")
def get_posts():
    return Response(json.dumps(getPosts(), cls=JSONEncoder), media_type="application/json")

@router.get("/{id}")
def get_post(id):
    return Response(json.dumps(getPost(id), cls=JSONEncoder), media_type="application/json")

@router.post("")
def create_post(body: PostBody):
    post = createPost(body.model_dump())
    return Response(json.dumps(post, cls=JSONEncoder), status_code=status.HTTP_201_CREATED, media_type="application/json")

@router.put("/{id}")
def update_post(id, body: PostUpdateBody):
    post = updatePost(id, body.model_dump(exclude_none=True))
    return Response(json.dumps(post, cls=JSONEncoder), media_type="application/json")

@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(id):
    deletePost(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
