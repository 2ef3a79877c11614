from fastapi import APIRouter, Depends, HTTPException

from larder.api.deps import get_store, not_found
from larder.domain.InventoryStore import InventoryStore
from larder.utilities.validators import RecipeInput, IngredientInput

router = APIRouter()


@router.get('')
def list_recipes(store: InventoryStore = Depends(get_store)):
    recipes = store.recipes
    return {'recipes': [r.to_dict() for r in recipes], 'count': len(recipes)}


@router.get('/available')
def available_recipes(store: InventoryStore = Depends(get_store)):
    """Recipes the kitchen can cook right now, with how many times each."""
    available = store.cookable_recipes()
    return {'count': len(available), 'total': len(store.recipes), 'recipes': available}


@router.get('/{recipe_id}')
def recipe_detail(recipe_id: str, store: InventoryStore = Depends(get_store)):
    recipe = store.get_recipe(recipe_id)
    if recipe is None:
        raise not_found('Recipe')
    return {'recipe': recipe.to_dict(), 'can_cook': store.can_cook(recipe_id)}


@router.post('')
def add_recipe(payload: RecipeInput, store: InventoryStore = Depends(get_store)):
    recipe = store.add_recipe(payload.name)
    if recipe is None:
        raise HTTPException(status_code=400, detail='Recipe name cannot be empty')
    return {'recipe': recipe.to_dict()}


@router.delete('/{recipe_id}')
def delete_recipe(recipe_id: str, store: InventoryStore = Depends(get_store)):
    if not store.delete_recipe({recipe_id}):
        raise not_found('Recipe')
    return {'deleted': recipe_id}


@router.post('/{recipe_id}/ingredients')
def add_ingredient(recipe_id: str, payload: IngredientInput, store: InventoryStore = Depends(get_store)):
    ingredient = store.add_ingredient(payload.name, payload.quantity, recipe_id)
    if ingredient is None:
        raise not_found('Recipe')
    return {'ingredient': ingredient.to_dict(), 'recipe': store.get_recipe(recipe_id).to_dict()}


@router.delete('/{recipe_id}/ingredients/{ingredient_id}')
def delete_ingredient(recipe_id: str, ingredient_id: str, store: InventoryStore = Depends(get_store)):
    if store.get_recipe(recipe_id) is None:
        raise not_found('Recipe')
    if not store.delete_ingredient({ingredient_id}, recipe_id):
        raise not_found('Ingredient')
    return {'recipe': store.get_recipe(recipe_id).to_dict()}


@router.post('/{recipe_id}/add-missing')
def add_missing(recipe_id: str, store: InventoryStore = Depends(get_store)):
    if store.get_recipe(recipe_id) is None:
        raise not_found('Recipe')
    added = store.add_missing_ingredients_to_shopping(recipe_id)
    return {
        'added': [{'name': n, 'quantity': q} for n, q in added],
        'count': len(added),
        'shopping': [i.to_dict() for i in store.shopping_items],
    }


@router.post('/{recipe_id}/cook')
def cook(recipe_id: str, store: InventoryStore = Depends(get_store)):
    if store.get_recipe(recipe_id) is None:
        raise not_found('Recipe')
    if not store.cook_recipe(recipe_id):
        raise HTTPException(status_code=400, detail='Insufficient ingredients in kitchen')
    return {'cooked': recipe_id, 'kitchen': [i.to_dict() for i in store.kitchen_items]}
